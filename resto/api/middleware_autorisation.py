from __future__ import annotations

from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from resto.api.authentification import PasserelleAuthentification
from resto.api.autorisation import PolitiqueAutorisation
from resto.api.gestion_erreurs import reponse_erreur
from resto.core.erreurs import ErreurApplication


class MiddlewareAutorisation(BaseHTTPMiddleware):
    """Authentification + autorisation de chaque requête entrante.

    - Pose `request.state.contexte_auth` (anonyme si pas de jeton valide).
    - Applique la politique avant le routage : une requête refusée reçoit
      401/403 sans que son corps soit lu, même si la route n’existe pas ou
      si la méthode n’est pas permise.
    """

    def __init__(self, app: Any, *, passerelle: PasserelleAuthentification, politique: PolitiqueAutorisation):
        super().__init__(app)
        self._passerelle = passerelle
        self._politique = politique

    async def dispatch(self, request: Request, call_next) -> Response:
        contexte = self._passerelle.authentifier(request.headers.get("authorization"))
        request.state.contexte_auth = contexte

        try:
            self._politique.verifier(request.url.path, contexte)
        except ErreurApplication as exc:
            return reponse_erreur(exc.statut_http, exc.message, exc.details)

        return await call_next(request)
