from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from resto.api.dependances import fournir_session
from resto.api.schemas.auth import ReponseInscription, ReponseLogin, RequeteInscription, RequeteLogin
from resto.core.securite import ServiceJeton
from resto.domaine.services.authentification import ServiceAuthentification
from resto.domaine.services.ressources import ServiceClient


logger = logging.getLogger(__name__)


def creer_routeur_auth(service_jeton: ServiceJeton) -> APIRouter:
    routeur_auth = APIRouter(prefix="/api/auth", tags=["auth"])

    @routeur_auth.post("/login", response_model=ReponseLogin)
    async def login(requete: RequeteLogin, session: AsyncSession = Depends(fournir_session)) -> ReponseLogin:
        service = ServiceAuthentification(session, service_jeton)
        jeton = await service.connecter(email=requete.email, mot_de_passe=requete.password)
        return ReponseLogin(jwt=jeton)

    @routeur_auth.post("/register", response_model=ReponseInscription)
    async def register(
        requete: RequeteInscription,
        session: AsyncSession = Depends(fournir_session),
    ) -> ReponseInscription:
        """Inscription : aucun jeton n’est émis, il faut ensuite se connecter."""

        client = await ServiceClient(session).creer(requete.model_dump())
        logger.info("auth_inscription email=%s role=%s", client.email, client.role.value)
        return ReponseInscription(message="Utilisateur enregistré avec succès !")

    return routeur_auth
