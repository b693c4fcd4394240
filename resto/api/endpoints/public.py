from __future__ import annotations

from fastapi import APIRouter

from resto.core.configuration import ParametresApplication


def creer_routeur_public(parametres: ParametresApplication) -> APIRouter:
    """Endpoints d’information accessibles sans authentification."""

    routeur_public = APIRouter(prefix="/api", tags=["public"])

    @routeur_public.get("/info")
    async def info() -> dict[str, str]:
        return {
            "nom": parametres.nom_application,
            "version": parametres.version_application,
        }

    @routeur_public.get("/contact")
    async def contact() -> dict[str, str]:
        return {"email": parametres.email_contact}

    return routeur_public
