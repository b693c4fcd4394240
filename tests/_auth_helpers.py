"""Helpers d'auth STRICTEMENT côté tests.

Les jetons sont sans état : un jeton signé avec le secret de test suffit,
aucun compte n'a besoin d'exister en base pour passer la politique d'accès.
"""

from __future__ import annotations

from dataclasses import dataclass

from resto.core.configuration import ParametresApplication
from resto.core.securite import ServiceJeton
from resto.domaine.enums.types import Role


PARAMETRES_TEST = ParametresApplication(
    url_base_donnees="sqlite+aiosqlite://",
    jwt_secret="secret-de-test",
    jwt_duree_minutes=30,
)


@dataclass
class _Identite:
    email: str
    role: Role


def jeton_test(role: Role, email: str | None = None) -> str:
    service = ServiceJeton(secret=PARAMETRES_TEST.jwt_secret, duree_minutes=PARAMETRES_TEST.jwt_duree_minutes)
    return service.emettre(_Identite(email=email or f"{role.value.lower()}@example.com", role=role))


def entetes(role: Role, email: str | None = None) -> dict[str, str]:
    return {"Authorization": f"Bearer {jeton_test(role, email)}"}


def entetes_admin() -> dict[str, str]:
    return entetes(Role.ADMIN)


def entetes_client() -> dict[str, str]:
    return entetes(Role.CLIENT)
