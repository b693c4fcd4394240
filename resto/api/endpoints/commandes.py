from __future__ import annotations

from fastapi import APIRouter

from resto.api.endpoints.crud import ajouter_routes_crud
from resto.api.schemas.commande import CommandeEcriture, CommandeLecture
from resto.domaine.services.ressources import ServiceCommande


routeur_commandes = ajouter_routes_crud(
    APIRouter(prefix="/api/commandes", tags=["commandes"]),
    service_cls=ServiceCommande,
    schema_ecriture=CommandeEcriture,
    schema_lecture=CommandeLecture,
)
