from __future__ import annotations

from sqlalchemy import JSON, Boolean, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from resto.domaine.modeles.base import ModeleHorodate, nouvel_identifiant


class Plat(ModeleHorodate):
    __tablename__ = "plat"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=nouvel_identifiant)

    nom: Mapped[str] = mapped_column(String(200), nullable=False)
    prix: Mapped[float] = mapped_column(Float, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    categorie: Mapped[str | None] = mapped_column(String(100), nullable=True)

    allergenes: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    disponible: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)


class MenuPlat(ModeleHorodate):
    """Référence ordonnée d’un menu vers un plat.

    `plat_id` n’est pas une clé étrangère : supprimer un plat ne touche pas
    aux menus qui le référencent.
    """

    __tablename__ = "menu_plat"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=nouvel_identifiant)
    menu_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("menu.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    plat_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)


class Menu(ModeleHorodate):
    __tablename__ = "menu"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=nouvel_identifiant)

    nom: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    prix: Mapped[float] = mapped_column(Float, nullable=False)

    lignes: Mapped[list[MenuPlat]] = relationship(
        "MenuPlat",
        order_by=MenuPlat.position,
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @property
    def plat_ids(self) -> list[str]:
        return [l.plat_id for l in self.lignes]

    def definir_plats(self, plat_ids: list[str]) -> None:
        self.lignes = [MenuPlat(position=i, plat_id=p) for i, p in enumerate(plat_ids)]
