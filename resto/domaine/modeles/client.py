from __future__ import annotations

from sqlalchemy import Enum, String
from sqlalchemy.orm import Mapped, mapped_column

from resto.domaine.enums.types import Role
from resto.domaine.modeles.base import ModeleHorodate, nouvel_identifiant


class Client(ModeleHorodate):
    """Compte du back office (client ou administrateur)."""

    __tablename__ = "client"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=nouvel_identifiant)

    nom: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True, index=True)
    mot_de_passe_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    role: Mapped[Role] = mapped_column(
        Enum(Role, name="role_client", native_enum=False, length=20),
        nullable=False,
        default=Role.CLIENT,
    )

    adresse: Mapped[str | None] = mapped_column(String(500), nullable=True)
