from __future__ import annotations

from fastapi import status


class ErreurApplication(Exception):
    """Erreur remontée jusqu’au normaliseur d’erreurs HTTP.

    Chaque sous-classe fixe son statut HTTP ; `details` est un dictionnaire
    champ -> message ou None.
    """

    statut_http: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class ErreurValidation(ErreurApplication):
    """Payload invalide : un message par champ fautif."""

    statut_http = status.HTTP_400_BAD_REQUEST

    def __init__(self, details: dict[str, str], message: str = "Erreur de validation") -> None:
        super().__init__(message, details)


class EmailDejaUtilise(ErreurApplication):
    statut_http = status.HTTP_400_BAD_REQUEST

    def __init__(self, email: str) -> None:
        super().__init__("Erreur : L'email est déjà utilisé.")
        self.email = email


class RessourceIntrouvable(ErreurApplication):
    statut_http = status.HTTP_404_NOT_FOUND

    def __init__(self, ressource: str, champ: str, valeur: object) -> None:
        super().__init__(f"{ressource} non trouvé avec {champ} : '{valeur}'")
        self.ressource = ressource
        self.champ = champ
        self.valeur = valeur


class IdentifiantsInvalides(ErreurApplication):
    statut_http = status.HTTP_401_UNAUTHORIZED

    def __init__(self) -> None:
        super().__init__("Identifiants invalides.")


class AuthentificationRequise(ErreurApplication):
    statut_http = status.HTTP_401_UNAUTHORIZED

    def __init__(self) -> None:
        super().__init__("Authentification requise.")


class AccesRefuse(ErreurApplication):
    statut_http = status.HTTP_403_FORBIDDEN

    def __init__(self) -> None:
        super().__init__("Accès interdit.")
