from __future__ import annotations

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, field_validator

from resto.api.schemas.client import ClientEcriture


class RequeteLogin(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def _normaliser_email(cls, valeur: str) -> str:
        # Même forme normalisée que `EmailStr` à l’inscription (domaine en minuscules).
        # Une adresse mal formée est gardée telle quelle : elle finira en 401, pas en 400.
        try:
            return validate_email(valeur, check_deliverability=False).normalized
        except EmailNotValidError:
            return valeur


class ReponseLogin(BaseModel):
    jwt: str


class RequeteInscription(ClientEcriture):
    """Mêmes champs qu’un client : nom, email, password, adresse, role."""


class ReponseInscription(BaseModel):
    message: str
