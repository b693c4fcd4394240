from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path

import httpx
import pytest_asyncio
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from resto.api.dependances import fournir_session
from resto.domaine.modeles import BaseModele  # importe aussi tous les modèles
from resto.main import creer_application
from tests._auth_helpers import PARAMETRES_TEST


@pytest_asyncio.fixture
async def moteur_test(tmp_path: Path) -> AsyncIterator[AsyncEngine]:
    """Base SQLite jetable, schéma créé depuis les métadonnées.

    Scope function : un moteur async ne doit jamais être partagé entre
    plusieurs event loops.
    """

    moteur = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'resto_test.db'}")

    async with moteur.begin() as connexion:
        await connexion.run_sync(BaseModele.metadata.create_all)

    try:
        yield moteur
    finally:
        await moteur.dispose()


@pytest_asyncio.fixture
async def session_test(moteur_test: AsyncEngine) -> AsyncIterator[AsyncSession]:
    """Session SQLAlchemy async isolée par test."""

    fabrique = async_sessionmaker(
        bind=moteur_test,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with fabrique() as session:
        try:
            yield session
        finally:
            # Sécurité : rollback si le test a oublié de commit
            await session.rollback()


@pytest_asyncio.fixture
async def application_test(moteur_test: AsyncEngine) -> FastAPI:
    app = creer_application(PARAMETRES_TEST)

    fabrique = async_sessionmaker(bind=moteur_test, class_=AsyncSession, expire_on_commit=False)

    async def _fournir_session_override() -> AsyncIterator[AsyncSession]:
        async with fabrique() as s:
            yield s

    app.dependency_overrides[fournir_session] = _fournir_session_override
    return app


@pytest_asyncio.fixture
async def client_api(application_test: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    # raise_app_exceptions=False : les erreurs 500 arrivent sous forme de réponse.
    transport = httpx.ASGITransport(app=application_test, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
