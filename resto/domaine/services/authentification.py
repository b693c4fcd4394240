from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from resto.core.erreurs import IdentifiantsInvalides
from resto.core.securite import ServiceJeton, verifier_mot_de_passe
from resto.domaine.depots import DepotClient


logger = logging.getLogger(__name__)


class ServiceAuthentification:
    """Vérifie des identifiants et émet un jeton de session.

    Aucun jeton n’est émis si l’email est inconnu ou si le mot de passe ne
    correspond pas : les deux cas lèvent la même erreur.
    """

    def __init__(self, session: AsyncSession, service_jeton: ServiceJeton) -> None:
        self._depot = DepotClient(session)
        self._service_jeton = service_jeton

    async def connecter(self, *, email: str, mot_de_passe: str) -> str:
        client = await self._depot.trouver_par_email(email)
        if client is None or not verifier_mot_de_passe(mot_de_passe, client.mot_de_passe_hash):
            logger.info("auth_login_echec email=%s", email)
            raise IdentifiantsInvalides()

        logger.info("auth_login_ok email=%s role=%s", client.email, client.role.value)
        return self._service_jeton.emettre(client)
