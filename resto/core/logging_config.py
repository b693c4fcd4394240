from __future__ import annotations

import logging
import os


def configurer_logging() -> None:
    """Logs du back office au format clé=valeur sur stdout.

    - `LOG_LEVEL` : niveau racine (INFO par défaut)
    - `LOG_SQL=1` : trace aussi les requêtes émises par SQLAlchemy

    Appelée à chaque `creer_application()` ; un seul handler est installé.
    """

    niveau = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper().strip(), logging.INFO)

    racine = logging.getLogger()
    if racine.handlers:
        racine.setLevel(niveau)
    else:
        logging.basicConfig(
            level=niveau,
            format="%(asctime)s level=%(levelname)s logger=%(name)s msg=%(message)s",
        )

    if os.getenv("LOG_SQL", "").strip() in {"1", "true", "oui"}:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)
