from __future__ import annotations

import enum


PREFIXE_AUTORITE = "ROLE_"


class Role(str, enum.Enum):
    """Rôle d’un client du back office.

    Stocké et transporté (JWT) sous sa valeur brute. Le libellé préfixé
    (`ROLE_ADMIN`) n’existe qu’au moment du contrôle d’autorisation.
    """

    ADMIN = "ADMIN"
    CLIENT = "CLIENT"

    @property
    def autorite(self) -> str:
        return f"{PREFIXE_AUTORITE}{self.value}"

    @classmethod
    def depuis_libelle(cls, libelle: str) -> "Role":
        """Accepte `ADMIN`, `admin` ou `ROLE_ADMIN`."""

        valeur = libelle.strip().upper()
        if valeur.startswith(PREFIXE_AUTORITE):
            valeur = valeur[len(PREFIXE_AUTORITE) :]
        return cls(valeur)


class StatutCommande(str, enum.Enum):
    """Statut d’une commande.

    Aucune règle de transition : n’importe quel statut peut succéder à
    n’importe quel autre.
    """

    EN_ATTENTE = "EN_ATTENTE"
    EN_PREPARATION = "EN_PREPARATION"
    PRETE = "PRETE"
    LIVREE = "LIVREE"
