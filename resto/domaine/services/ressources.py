from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from resto.core.erreurs import EmailDejaUtilise, ErreurValidation, RessourceIntrouvable
from resto.core.securite import hasher_mot_de_passe
from resto.domaine.depots import Depot, DepotClient, DepotCommande, DepotMenu, DepotPlat
from resto.domaine.modeles import Client, Commande, Menu, ModeleHorodate, Plat


logger = logging.getLogger(__name__)

M = TypeVar("M", bound=ModeleHorodate)


class ServiceRessource(ABC, Generic[M]):
    """Contrat CRUD commun aux quatre ressources.

    - `creer` : l’identifiant est toujours attribué par le serveur.
    - `mettre_a_jour` : remplacement complet ; 404 si l’entité n’existe pas
      avant écriture (et aucune écriture dans ce cas).
    - `supprimer` : 404 si l’entité n’existe pas.

    Les sous-classes fournissent `_appliquer`, qui recopie un payload validé
    sur l’entité (et peut lever `ErreurValidation`).
    """

    nom_ressource: ClassVar[str] = "Ressource"
    depot_cls: ClassVar[type[Depot[Any]]]

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self.depot: Depot[M] = self.depot_cls(session)

    async def lister(self) -> list[M]:
        return await self.depot.lister()

    async def lire(self, identifiant: str) -> M:
        entite = await self.depot.obtenir(identifiant)
        if entite is None:
            raise RessourceIntrouvable(self.nom_ressource, "id", identifiant)
        return entite

    async def creer(self, donnees: dict[str, Any]) -> M:
        entite = self.depot_cls.modele()
        await self._appliquer(entite, donnees)
        entite = await self._ecrire(entite, nouvelle=True)
        logger.info("%s_creation id=%s", self.nom_ressource.lower(), entite.id)
        return entite

    async def mettre_a_jour(self, identifiant: str, donnees: dict[str, Any]) -> M:
        entite = await self.lire(identifiant)
        await self._appliquer(entite, donnees)
        entite = await self._ecrire(entite, nouvelle=False)
        logger.info("%s_mise_a_jour id=%s", self.nom_ressource.lower(), identifiant)
        return entite

    async def supprimer(self, identifiant: str) -> None:
        entite = await self.lire(identifiant)
        await self.depot.supprimer(entite)
        logger.info("%s_suppression id=%s", self.nom_ressource.lower(), identifiant)

    async def _ecrire(self, entite: M, *, nouvelle: bool) -> M:
        if nouvelle:
            return await self.depot.ajouter(entite)
        return await self.depot.enregistrer(entite)

    @abstractmethod
    async def _appliquer(self, entite: M, donnees: dict[str, Any]) -> None:
        """Recopie `donnees` (payload validé) sur `entite`."""


class ServiceClient(ServiceRessource[Client]):
    nom_ressource = "Client"
    depot_cls = DepotClient

    async def _appliquer(self, entite: Client, donnees: dict[str, Any]) -> None:
        email = donnees["email"]
        depot: DepotClient = self.depot  # type: ignore[assignment]

        existant = await depot.trouver_par_email(email)
        if existant is not None and existant.id != entite.id:
            raise EmailDejaUtilise(email)

        entite.nom = donnees["nom"]
        entite.email = email
        entite.mot_de_passe_hash = hasher_mot_de_passe(donnees["password"])
        entite.role = donnees["role"]
        entite.adresse = donnees.get("adresse")

    async def _ecrire(self, entite: Client, *, nouvelle: bool) -> Client:
        # Course entre deux inscriptions simultanées : la contrainte unique tranche.
        try:
            return await super()._ecrire(entite, nouvelle=nouvelle)
        except IntegrityError as e:
            await self.depot.annuler()
            logger.info("client_email_conflit email=%s", entite.email)
            raise EmailDejaUtilise(entite.email) from e


class ServicePlat(ServiceRessource[Plat]):
    nom_ressource = "Plat"
    depot_cls = DepotPlat

    async def lister_disponibles(self) -> list[Plat]:
        # Filtre en mémoire sur la liste complète.
        return [p for p in await self.lister() if p.disponible]

    async def _appliquer(self, entite: Plat, donnees: dict[str, Any]) -> None:
        entite.nom = donnees["nom"]
        entite.prix = donnees["prix"]
        entite.description = donnees.get("description")
        entite.categorie = donnees.get("categorie")
        entite.allergenes = list(donnees.get("allergenes") or [])
        entite.disponible = donnees["disponible"]


async def _verifier_plats(session: AsyncSession, plat_ids: list[str]) -> None:
    inconnus = await DepotPlat(session).ids_inconnus(plat_ids)
    if inconnus:
        raise ErreurValidation({"plat_ids": f"Plat(s) introuvable(s) : {', '.join(inconnus)}"})


class ServiceMenu(ServiceRessource[Menu]):
    nom_ressource = "Menu"
    depot_cls = DepotMenu

    async def _appliquer(self, entite: Menu, donnees: dict[str, Any]) -> None:
        plat_ids = list(donnees.get("plat_ids") or [])
        await _verifier_plats(self._session, plat_ids)

        entite.nom = donnees["nom"]
        entite.description = donnees.get("description")
        entite.prix = donnees["prix"]
        entite.definir_plats(plat_ids)


class ServiceCommande(ServiceRessource[Commande]):
    nom_ressource = "Commande"
    depot_cls = DepotCommande

    async def _appliquer(self, entite: Commande, donnees: dict[str, Any]) -> None:
        plat_ids = list(donnees.get("plat_ids") or [])
        await _verifier_plats(self._session, plat_ids)

        client_id = donnees.get("client_id")
        if client_id is not None and await DepotClient(self._session).obtenir(client_id) is None:
            raise ErreurValidation({"client_id": f"Client introuvable : {client_id}"})

        entite.date = donnees.get("date")
        entite.statut = donnees["statut"]
        entite.client_id = client_id
        entite.prix_total = donnees["prix_total"]
        entite.definir_plats(plat_ids)
