# Pas de `from __future__ import annotations` ici : FastAPI doit voir les
# vrais types des schémas passés en paramètre de `ajouter_routes_crud`.

import logging
from typing import Any

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from resto.api.dependances import fournir_session
from resto.domaine.services.ressources import ServiceRessource


logger = logging.getLogger(__name__)


def reponse_liste(entites: list[Any]) -> Any:
    """204 sans corps pour une liste vide, la liste sinon."""

    if not entites:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return entites


def ajouter_routes_crud(
    routeur: APIRouter,
    *,
    service_cls: type[ServiceRessource[Any]],
    schema_ecriture: type[BaseModel],
    schema_lecture: type[BaseModel],
) -> APIRouter:
    """Pose les cinq routes CRUD sur `routeur`.

    Les routes spécifiques (ex : `/disponibles`) doivent être déclarées sur
    le routeur avant l’appel, pour passer devant `/{identifiant}`.
    """

    nom = service_cls.nom_ressource

    @routeur.get(
        "",
        response_model=list[schema_lecture],
        responses={204: {"description": f"Aucun {nom.lower()}"}},
        summary=f"Lister les {nom.lower()}s",
    )
    async def lister(session: AsyncSession = Depends(fournir_session)):
        return reponse_liste(await service_cls(session).lister())

    @routeur.get("/{identifiant}", response_model=schema_lecture, summary=f"Lire un {nom.lower()}")
    async def lire(identifiant: str, session: AsyncSession = Depends(fournir_session)):
        return await service_cls(session).lire(identifiant)

    @routeur.post(
        "",
        response_model=schema_lecture,
        status_code=status.HTTP_201_CREATED,
        summary=f"Créer un {nom.lower()}",
    )
    async def creer(donnees: schema_ecriture, session: AsyncSession = Depends(fournir_session)):
        return await service_cls(session).creer(donnees.model_dump())

    @routeur.put("/{identifiant}", response_model=schema_lecture, summary=f"Remplacer un {nom.lower()}")
    async def mettre_a_jour(
        identifiant: str,
        donnees: schema_ecriture,
        session: AsyncSession = Depends(fournir_session),
    ):
        return await service_cls(session).mettre_a_jour(identifiant, donnees.model_dump())

    @routeur.delete(
        "/{identifiant}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        summary=f"Supprimer un {nom.lower()}",
    )
    async def supprimer(identifiant: str, session: AsyncSession = Depends(fournir_session)):
        await service_cls(session).supprimer(identifiant)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return routeur
