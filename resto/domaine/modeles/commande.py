from __future__ import annotations

from sqlalchemy import Enum, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from resto.domaine.enums.types import StatutCommande
from resto.domaine.modeles.base import ModeleHorodate, nouvel_identifiant


class CommandePlat(ModeleHorodate):
    """Plat commandé, à sa position dans la commande.

    Un même plat peut apparaître plusieurs fois.
    """

    __tablename__ = "commande_plat"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=nouvel_identifiant)
    commande_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("commande.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    plat_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)


class Commande(ModeleHorodate):
    __tablename__ = "commande"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=nouvel_identifiant)

    # Date telle que saisie (texte libre côté API).
    date: Mapped[str | None] = mapped_column(String(50), nullable=True)

    statut: Mapped[StatutCommande] = mapped_column(
        Enum(StatutCommande, name="statut_commande", native_enum=False, length=20),
        nullable=False,
        default=StatutCommande.EN_ATTENTE,
    )

    client_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("client.id", ondelete="SET NULL"), nullable=True, index=True
    )

    prix_total: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)

    lignes: Mapped[list[CommandePlat]] = relationship(
        "CommandePlat",
        order_by=CommandePlat.position,
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @property
    def plat_ids(self) -> list[str]:
        return [l.plat_id for l in self.lignes]

    def definir_plats(self, plat_ids: list[str]) -> None:
        self.lignes = [CommandePlat(position=i, plat_id=p) for i, p in enumerate(plat_ids)]
