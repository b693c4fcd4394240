"""Seed de démonstration (idempotent).

Crée :
- un compte administrateur
- quelques plats de la carte

Exécution (depuis la racine du repo) :
    python -m scripts.seed_demo --email admin@resto.local --mot-de-passe admin
"""

from __future__ import annotations

import argparse
import asyncio
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from resto.core.base_donnees import creer_moteur_async
from resto.core.logging_config import configurer_logging
from resto.core.securite import hasher_mot_de_passe
from resto.domaine.depots import DepotClient
from resto.domaine.enums.types import Role
from resto.domaine.modeles import Client, Plat


logger = logging.getLogger(__name__)


PLATS_DEMO: list[dict] = [
    {"nom": "Tajine", "prix": 45.0, "categorie": "plat", "allergenes": [], "disponible": True},
    {"nom": "Couscous royal", "prix": 60.0, "categorie": "plat", "allergenes": ["gluten"], "disponible": True},
    {"nom": "Pastilla", "prix": 55.0, "categorie": "entree", "allergenes": ["gluten", "fruits a coque"], "disponible": False},
]


async def seed_demo(session: AsyncSession, *, email_admin: str, mot_de_passe_admin: str) -> None:
    # Admin
    admin = await DepotClient(session).trouver_par_email(email_admin)
    if admin is None:
        session.add(
            Client(
                nom="Administrateur",
                email=email_admin,
                mot_de_passe_hash=hasher_mot_de_passe(mot_de_passe_admin),
                role=Role.ADMIN,
                adresse=None,
            )
        )
        logger.info("seed_admin_cree email=%s", email_admin)

    # Plats
    res = await session.execute(select(Plat.nom))
    existants = set(res.scalars().all())
    for donnees in PLATS_DEMO:
        if donnees["nom"] in existants:
            continue
        session.add(Plat(description=None, **donnees))
        logger.info("seed_plat_cree nom=%s", donnees["nom"])

    await session.commit()


async def main(email_admin: str, mot_de_passe_admin: str) -> None:
    moteur = creer_moteur_async()
    fabrique = async_sessionmaker(moteur, expire_on_commit=False)
    try:
        async with fabrique() as session:
            await seed_demo(session, email_admin=email_admin, mot_de_passe_admin=mot_de_passe_admin)
    finally:
        await moteur.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed de démonstration du back office.")
    parser.add_argument("--email", default="admin@resto.local")
    parser.add_argument("--mot-de-passe", dest="mot_de_passe", required=True)
    args = parser.parse_args()

    configurer_logging()
    asyncio.run(main(args.email, args.mot_de_passe))
