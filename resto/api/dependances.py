from __future__ import annotations

from collections.abc import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession

from resto.core.base_donnees import fournir_session_async


async def fournir_session() -> AsyncIterator[AsyncSession]:
    """Dépendance FastAPI : fournit une session SQLAlchemy asynchrone."""

    async for session in fournir_session_async():
        yield session
