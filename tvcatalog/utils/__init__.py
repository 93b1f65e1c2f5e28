"""
Utilitaires et constantes pour tvcatalog.

Ce module contient les constantes et fonctions utilitaires partagees.
"""

from tvcatalog.utils.constants import (
    CHANNEL_ENTRY,
    DEFAULT_GROUP_NAME,
    SERVICE_ENTRY,
)
from tvcatalog.utils.helpers import describe_ca_system, slugify, to_printable

__all__ = [
    "CHANNEL_ENTRY",
    "DEFAULT_GROUP_NAME",
    "SERVICE_ENTRY",
    "describe_ca_system",
    "slugify",
    "to_printable",
]
