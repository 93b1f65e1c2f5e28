"""
Configuration du logging de tvcatalog via loguru.

La console affiche les messages a partir de `log_level`. Le fichier recoit
tout le journal du catalogue en JSON, y compris les traces DEBUG du
chargement (chaines creees, services lies, flux).
"""

import sys

from loguru import logger

from .config import Settings


def _catalog_records(record) -> bool:
    return record["name"].startswith("tvcatalog")


def configure_logging(settings: Settings) -> None:
    """Installe les handlers console et fichier a partir des Settings.

    Args :
        settings : Parametres de l'application (niveau, fichier, rotation, retention)
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=settings.log_level,
        format=(
            "<green>{time:HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        settings.log_file,
        level="DEBUG",
        filter=_catalog_records,
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        enqueue=True,
    )
