from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from resto.domaine.enums.types import StatutCommande


class CommandeEcriture(BaseModel):
    """Payload de commande.

    `prix_total` est stocké tel quel : aucun calcul à partir des plats.
    """

    date: str | None = Field(default=None, max_length=50)
    plat_ids: list[str] = Field(default_factory=list)
    statut: StatutCommande = StatutCommande.EN_ATTENTE
    client_id: str | None = None
    prix_total: float = Field(default=0.0, ge=0)


class CommandeLecture(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    date: str | None = None
    plat_ids: list[str]
    statut: StatutCommande
    client_id: str | None = None
    prix_total: float
