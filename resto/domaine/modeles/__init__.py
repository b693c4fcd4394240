"""Modèles SQLAlchemy.

Aucune logique métier ici : uniquement la structure des tables.
"""

from resto.domaine.modeles.base import BaseModele, ModeleHorodate
from resto.domaine.modeles.client import Client
from resto.domaine.modeles.carte import Menu, MenuPlat, Plat
from resto.domaine.modeles.commande import Commande, CommandePlat

__all__ = [
    "BaseModele",
    "ModeleHorodate",
    # Comptes
    "Client",
    # Carte
    "Plat",
    "Menu",
    "MenuPlat",
    # Commandes
    "Commande",
    "CommandePlat",
]
