from __future__ import annotations

from fastapi import APIRouter

from resto.api.endpoints.crud import ajouter_routes_crud
from resto.api.schemas.carte import MenuEcriture, MenuLecture
from resto.domaine.services.ressources import ServiceMenu


routeur_menus = ajouter_routes_crud(
    APIRouter(prefix="/api/menus", tags=["menus"]),
    service_cls=ServiceMenu,
    schema_ecriture=MenuEcriture,
    schema_lecture=MenuLecture,
)
