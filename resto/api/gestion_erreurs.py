from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from resto.core.erreurs import ErreurApplication


logger = logging.getLogger(__name__)

MESSAGE_ERREUR_INTERNE = "Une erreur interne s'est produite"


def reponse_erreur(statut: int, message: str, details: dict[str, str] | None = None) -> JSONResponse:
    """Enveloppe unique de toutes les réponses d’erreur."""

    return JSONResponse(
        status_code=statut,
        content={
            "timestamp": datetime.now(tz=timezone.utc).isoformat(),
            "status": statut,
            "message": message,
            "details": details,
        },
    )


def _nom_champ(erreur: dict[str, Any]) -> str:
    if erreur.get("type") == "json_invalid":
        return "body"

    loc = list(erreur.get("loc") or ())
    if loc and loc[0] in {"body", "query", "path", "header"}:
        loc = loc[1:]
    return ".".join(str(p) for p in loc) or "body"


def details_validation(erreurs: list[dict[str, Any]]) -> dict[str, str]:
    """Erreurs pydantic -> {champ: message}, premier message par champ."""

    details: dict[str, str] = {}
    for erreur in erreurs:
        details.setdefault(_nom_champ(erreur), str(erreur.get("msg", "invalide")))
    return details


async def _gerer_erreur_application(request: Request, exc: ErreurApplication) -> JSONResponse:
    return reponse_erreur(exc.statut_http, exc.message, exc.details)


async def _gerer_validation_requete(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = details_validation(list(exc.errors()))
    logger.info("validation_echec chemin=%s champs=%s", request.url.path, ",".join(details))
    return reponse_erreur(status.HTTP_400_BAD_REQUEST, "Erreur de validation", details)


async def _gerer_http(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    reponse = reponse_erreur(exc.status_code, message)
    if exc.headers:
        reponse.headers.update(exc.headers)
    return reponse


async def _gerer_erreur_inattendue(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("erreur_inattendue chemin=%s", request.url.path)
    return reponse_erreur(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        MESSAGE_ERREUR_INTERNE,
        {"error": str(exc)},
    )


def installer_gestion_erreurs(application: FastAPI) -> None:
    application.add_exception_handler(ErreurApplication, _gerer_erreur_application)
    application.add_exception_handler(RequestValidationError, _gerer_validation_requete)
    application.add_exception_handler(StarletteHTTPException, _gerer_http)
    application.add_exception_handler(Exception, _gerer_erreur_inattendue)
