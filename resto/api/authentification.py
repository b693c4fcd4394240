from __future__ import annotations

import logging
from dataclasses import dataclass

from fastapi import Request

from resto.core.securite import ServiceJeton
from resto.domaine.enums.types import Role


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContexteAuth:
    """Identité attachée à la requête courante (anonyme si email est None)."""

    email: str | None = None
    role: Role | None = None

    @property
    def est_authentifie(self) -> bool:
        return self.email is not None

    @classmethod
    def anonyme(cls) -> "ContexteAuth":
        return cls()


def extraire_bearer(authorization: str | None) -> str | None:
    if authorization is None:
        return None
    prefix = "bearer "
    if authorization.lower().startswith(prefix):
        jeton = authorization[len(prefix) :].strip()
        return jeton or None
    return None


class PasserelleAuthentification:
    """Entête `Authorization` -> `ContexteAuth`.

    Ne refuse jamais une requête. Sans jeton, ou avec un jeton invalide, la
    requête continue en anonyme ; c’est la politique d’autorisation qui
    décide ensuite.
    """

    def __init__(self, service_jeton: ServiceJeton) -> None:
        self._service_jeton = service_jeton

    def authentifier(self, authorization: str | None) -> ContexteAuth:
        jeton = extraire_bearer(authorization)
        if jeton is None:
            return ContexteAuth.anonyme()

        revendications = self._service_jeton.verifier(jeton)
        if revendications is None:
            logger.info("auth_jeton_rejete")
            return ContexteAuth.anonyme()

        return ContexteAuth(email=revendications.email, role=revendications.role)


def fournir_contexte_auth(request: Request) -> ContexteAuth:
    """Dépendance FastAPI : identité posée par `MiddlewareAutorisation`."""

    contexte = getattr(request.state, "contexte_auth", None)
    return contexte if isinstance(contexte, ContexteAuth) else ContexteAuth.anonyme()
