from __future__ import annotations

from fastapi import FastAPI

from resto.api.authentification import PasserelleAuthentification
from resto.api.autorisation import PolitiqueAutorisation
from resto.api.endpoints.auth import creer_routeur_auth
from resto.api.endpoints.clients import routeur_clients
from resto.api.endpoints.commandes import routeur_commandes
from resto.api.endpoints.menus import routeur_menus
from resto.api.endpoints.plats import routeur_plats
from resto.api.endpoints.public import creer_routeur_public
from resto.api.gestion_erreurs import installer_gestion_erreurs
from resto.api.middleware_autorisation import MiddlewareAutorisation
from resto.api.sante import routeur_sante
from resto.core.configuration import ParametresApplication, parametres_application
from resto.core.logging_config import configurer_logging
from resto.core.securite import ServiceJeton


def creer_application(
    parametres: ParametresApplication | None = None,
    *,
    politique: PolitiqueAutorisation | None = None,
) -> FastAPI:
    """Assemble l’application : service de jetons, passerelle, politique, routeurs.

    La passerelle et la politique tournent en middleware, avant le routage
    et la lecture du corps de la requête.
    """

    configurer_logging()

    parametres = parametres or parametres_application
    service_jeton = ServiceJeton(secret=parametres.jwt_secret, duree_minutes=parametres.jwt_duree_minutes)

    application = FastAPI(title=parametres.nom_application, version=parametres.version_application)
    installer_gestion_erreurs(application)
    application.add_middleware(
        MiddlewareAutorisation,
        passerelle=PasserelleAuthentification(service_jeton),
        politique=politique or PolitiqueAutorisation(),
    )

    # Auth + endpoints publics
    application.include_router(creer_routeur_auth(service_jeton))
    application.include_router(creer_routeur_public(parametres))

    # Ressources
    application.include_router(routeur_clients)
    application.include_router(routeur_plats)
    application.include_router(routeur_menus)
    application.include_router(routeur_commandes)

    # Santé
    application.include_router(routeur_sante)

    application.state.service_jeton = service_jeton
    return application


app = creer_application()
