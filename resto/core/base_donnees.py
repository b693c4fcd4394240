from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from resto.core.configuration import parametres_application


# asyncpg lie ses connexions à la boucle qui les a ouvertes : un moteur par boucle.
_moteurs: dict[int, AsyncEngine] = {}
_fabriques: dict[int, async_sessionmaker[AsyncSession]] = {}


def _cle_boucle() -> int:
    try:
        return id(asyncio.get_running_loop())
    except RuntimeError:
        return 0


def creer_moteur_async(url: str | None = None) -> AsyncEngine:
    """Moteur vers la base du back office (`URL_BASE_DONNEES` par défaut).

    Utilisé tel quel par le script de seed, qui gère lui-même `dispose()`.
    """

    return create_async_engine(url or parametres_application.url_base_donnees, pool_pre_ping=True)


def _fabrique_session() -> async_sessionmaker[AsyncSession]:
    cle = _cle_boucle()
    if cle not in _fabriques:
        moteur = creer_moteur_async()
        _moteurs[cle] = moteur
        # expire_on_commit=False : les entités restent lisibles après commit pour la réponse HTTP.
        _fabriques[cle] = async_sessionmaker(bind=moteur, class_=AsyncSession, expire_on_commit=False)
    return _fabriques[cle]


async def fournir_session_async() -> AsyncIterator[AsyncSession]:
    """Une session par requête ; chaque écriture des dépôts commite elle-même."""

    async with _fabrique_session()() as session:
        yield session
