from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from resto.domaine.enums.types import Role


class ClientEcriture(BaseModel):
    """Payload de création / remplacement d’un client.

    Un `id` éventuellement fourni est ignoré.
    """

    nom: str = Field(min_length=1, max_length=200)
    email: EmailStr
    password: str = Field(min_length=1)
    adresse: str | None = Field(default=None, max_length=500)
    role: Role = Role.CLIENT

    @field_validator("role", mode="before")
    @classmethod
    def _normaliser_role(cls, valeur: Any) -> Any:
        # "ROLE_ADMIN" / "admin" -> Role.ADMIN ; le reste est laissé à pydantic.
        if isinstance(valeur, str):
            try:
                return Role.depuis_libelle(valeur)
            except ValueError:
                return valeur
        return valeur


class ClientLecture(BaseModel):
    """Client exposé par l’API (jamais le hash du mot de passe)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    nom: str
    email: str
    role: Role
    adresse: str | None = None
