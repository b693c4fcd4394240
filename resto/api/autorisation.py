from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from resto.api.authentification import ContexteAuth
from resto.core.erreurs import AccesRefuse, AuthentificationRequise
from resto.domaine.enums.types import Role


logger = logging.getLogger(__name__)


def motif_correspond(motif: str, chemin: str) -> bool:
    """`/x/**` couvre `/x` et tous ses sous-chemins ; sinon égalité stricte.

    Le slash final est ignoré des deux côtés.
    """

    chemin = chemin.rstrip("/") or "/"
    if motif.endswith("/**"):
        base = motif[: -len("/**")]
        if not base:
            return True
        return chemin == base or chemin.startswith(base + "/")
    return chemin == (motif.rstrip("/") or "/")


@dataclass(frozen=True)
class Regle:
    """Règle d’accès : un ou plusieurs motifs de chemin et leur exigence.

    - `acces_public` : aucune identité requise
    - `autorites` vide : toute identité authentifiée
    - sinon : l’une des autorités (`ROLE_...`) listées
    """

    motifs: tuple[str, ...]
    acces_public: bool = False
    autorites: frozenset[str] = frozenset()

    def couvre(self, chemin: str) -> bool:
        return any(motif_correspond(m, chemin) for m in self.motifs)


def roles(*roles_requis: Role) -> frozenset[str]:
    return frozenset(r.autorite for r in roles_requis)


REGLES_PAR_DEFAUT: tuple[Regle, ...] = (
    Regle(
        motifs=(
            "/api/auth/**",
            "/docs/**",
            "/redoc/**",
            "/openapi.json",
            "/health",
            "/api/public/**",
            "/api/info",
            "/api/contact",
        ),
        acces_public=True,
    ),
    Regle(motifs=("/api/menus",), autorites=roles(Role.CLIENT, Role.ADMIN)),
    Regle(motifs=("/api/commandes/**",), autorites=roles(Role.CLIENT, Role.ADMIN)),
    Regle(motifs=("/api/**",), autorites=roles(Role.ADMIN)),
    Regle(motifs=("/**",)),
)


class PolitiqueAutorisation:
    """Liste ordonnée de règles ; la première qui couvre le chemin s’applique."""

    def __init__(self, regles: Sequence[Regle] = REGLES_PAR_DEFAUT) -> None:
        self._regles = tuple(regles)

    def regle_pour(self, chemin: str) -> Regle | None:
        for regle in self._regles:
            if regle.couvre(chemin):
                return regle
        return None

    def verifier(self, chemin: str, contexte: ContexteAuth) -> None:
        regle = self.regle_pour(chemin)
        if regle is not None and regle.acces_public:
            return

        if not contexte.est_authentifie:
            logger.info("autorisation_refus_anonyme chemin=%s", chemin)
            raise AuthentificationRequise()

        # Aucune règle : au minimum une identité.
        if regle is None or not regle.autorites:
            return

        autorite = contexte.role.autorite if contexte.role is not None else None
        if autorite not in regle.autorites:
            logger.info("autorisation_refus chemin=%s email=%s role=%s", chemin, contexte.email, autorite)
            raise AccesRefuse()
