from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Protocol

import jwt
from passlib.context import CryptContext

from resto.domaine.enums.types import Role


logger = logging.getLogger(__name__)

_ALGORITHME = "HS256"

# bcrypt_sha256 : pas de limite à 72 octets, octets NUL acceptés. Les hash bcrypt simples restent vérifiables.
_pwd_context = CryptContext(schemes=["bcrypt_sha256", "bcrypt"], deprecated="auto")


def hasher_mot_de_passe(mot_de_passe: str) -> str:
    return _pwd_context.hash(mot_de_passe)


def verifier_mot_de_passe(mot_de_passe: str, mot_de_passe_hash: str) -> bool:
    try:
        return _pwd_context.verify(mot_de_passe, mot_de_passe_hash)
    except ValueError:
        # Hash inconnu ou corrompu : jamais valide.
        logger.warning("securite_hash_illisible")
        return False


class IdentitePorteuse(Protocol):
    email: str
    role: Role


@dataclass(frozen=True)
class RevendicationsJeton:
    """Contenu vérifié d’un jeton de session."""

    email: str
    role: Role
    emis_le: datetime
    expire_le: datetime


class ServiceJeton:
    """Émission et vérification des jetons de session (JWT HS256).

    Jetons sans état : rien n’est stocké, rien n’est révocable. Un jeton reste
    valide jusqu’à son expiration naturelle.
    """

    def __init__(self, *, secret: str, duree_minutes: int) -> None:
        self._secret = secret
        self._duree = timedelta(minutes=duree_minutes)

    def emettre(self, identite: IdentitePorteuse) -> str:
        maintenant = datetime.now(tz=timezone.utc)
        expire_le = maintenant + self._duree

        payload = {
            "sub": identite.email,
            "role": Role(identite.role).value,
            "iat": int(maintenant.timestamp()),
            "exp": int(expire_le.timestamp()),
        }

        return jwt.encode(payload, self._secret, algorithm=_ALGORITHME)

    def verifier(self, jeton: str) -> RevendicationsJeton | None:
        """Retourne les revendications, ou None si le jeton est invalide."""

        try:
            payload = jwt.decode(
                jeton,
                self._secret,
                algorithms=[_ALGORITHME],
                options={"require": ["sub", "exp", "iat"]},
            )
        except jwt.InvalidTokenError as e:
            logger.debug("jeton_invalide raison=%s", e)
            return None

        try:
            role = Role(payload.get("role"))
        except ValueError:
            logger.debug("jeton_invalide raison=role_inconnu")
            return None

        return RevendicationsJeton(
            email=str(payload["sub"]),
            role=role,
            emis_le=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
            expire_le=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )
