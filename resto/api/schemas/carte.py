from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PlatEcriture(BaseModel):
    nom: str = Field(min_length=1, max_length=200)
    prix: float = Field(ge=0)
    description: str | None = None
    categorie: str | None = Field(default=None, max_length=100)
    allergenes: list[str] = Field(default_factory=list)
    disponible: bool = True

    @field_validator("allergenes")
    @classmethod
    def _dedoublonner(cls, valeurs: list[str]) -> list[str]:
        # Ensemble : doublons retirés, premier vu conservé.
        return list(dict.fromkeys(v.strip() for v in valeurs if v.strip()))


class PlatLecture(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    nom: str
    prix: float
    description: str | None = None
    categorie: str | None = None
    allergenes: list[str]
    disponible: bool


class MenuEcriture(BaseModel):
    nom: str = Field(min_length=1, max_length=200)
    description: str | None = None
    prix: float = Field(ge=0)
    plat_ids: list[str] = Field(default_factory=list)


class MenuLecture(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    nom: str
    description: str | None = None
    prix: float
    plat_ids: list[str]
