from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def _maintenant() -> datetime:
    return datetime.now(tz=timezone.utc)


def nouvel_identifiant() -> str:
    """Identifiant opaque attribué par le serveur à la création."""

    return str(uuid4())


class BaseModele(DeclarativeBase):
    """Base declarative SQLAlchemy.

    Les noms d’attributs restent en français.
    """


class ModeleHorodate(BaseModele):
    """Mixin de dates techniques."""

    __abstract__ = True

    cree_le: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_maintenant, nullable=False)
    mis_a_jour_le: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_maintenant,
        onupdate=_maintenant,
        nullable=False,
    )
