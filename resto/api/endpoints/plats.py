from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from resto.api.dependances import fournir_session
from resto.api.endpoints.crud import ajouter_routes_crud, reponse_liste
from resto.api.schemas.carte import PlatEcriture, PlatLecture
from resto.domaine.services.ressources import ServicePlat


routeur_plats = APIRouter(prefix="/api/plats", tags=["plats"])


@routeur_plats.get(
    "/disponibles",
    response_model=list[PlatLecture],
    responses={204: {"description": "Aucun plat disponible"}},
)
async def lister_plats_disponibles(session: AsyncSession = Depends(fournir_session)):
    """Plats marqués `disponible` (filtre en mémoire sur la liste complète)."""

    return reponse_liste(await ServicePlat(session).lister_disponibles())


ajouter_routes_crud(
    routeur_plats,
    service_cls=ServicePlat,
    schema_ecriture=PlatEcriture,
    schema_lecture=PlatLecture,
)
