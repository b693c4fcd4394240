from __future__ import annotations

from typing import ClassVar, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from resto.domaine.modeles import Client, Commande, Menu, ModeleHorodate, Plat


M = TypeVar("M", bound=ModeleHorodate)


class Depot(Generic[M]):
    """Accès persistance d’une entité.

    Chaque écriture est commitée immédiatement : une opération = une
    transaction. Aucune opération multi-étapes n’est garantie ici.
    """

    modele: ClassVar[type[ModeleHorodate]]

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def lister(self) -> list[M]:
        res = await self._session.execute(
            select(self.modele).order_by(self.modele.cree_le.asc(), self.modele.id.asc())
        )
        return list(res.scalars().all())

    async def obtenir(self, identifiant: str) -> M | None:
        res = await self._session.execute(select(self.modele).where(self.modele.id == identifiant))
        return res.scalar_one_or_none()

    async def ajouter(self, entite: M) -> M:
        self._session.add(entite)
        await self._session.commit()
        return entite

    async def enregistrer(self, entite: M) -> M:
        await self._session.commit()
        return entite

    async def supprimer(self, entite: M) -> None:
        await self._session.delete(entite)
        await self._session.commit()

    async def annuler(self) -> None:
        await self._session.rollback()


class DepotClient(Depot[Client]):
    modele = Client

    async def trouver_par_email(self, email: str) -> Client | None:
        res = await self._session.execute(select(Client).where(Client.email == email))
        return res.scalar_one_or_none()


class DepotPlat(Depot[Plat]):
    modele = Plat

    async def ids_inconnus(self, plat_ids: list[str]) -> list[str]:
        """Ids de la liste absents de la table plat (ordre et unicité conservés)."""

        if not plat_ids:
            return []

        res = await self._session.execute(select(Plat.id).where(Plat.id.in_(set(plat_ids))))
        connus = set(res.scalars().all())
        return [p for p in dict.fromkeys(plat_ids) if p not in connus]


class DepotMenu(Depot[Menu]):
    modele = Menu


class DepotCommande(Depot[Commande]):
    modele = Commande
