from __future__ import annotations

from fastapi import APIRouter

from resto.api.endpoints.crud import ajouter_routes_crud
from resto.api.schemas.client import ClientEcriture, ClientLecture
from resto.domaine.services.ressources import ServiceClient


routeur_clients = ajouter_routes_crud(
    APIRouter(prefix="/api/clients", tags=["clients"]),
    service_cls=ServiceClient,
    schema_ecriture=ClientEcriture,
    schema_lecture=ClientLecture,
)
