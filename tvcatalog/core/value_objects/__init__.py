"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- ConfigEntry : Entree de configuration declarative (channel, service)
- parse_leading_int : Conversion texte -> entier avec semantique atoi
"""

from tvcatalog.core.value_objects.config_entry import ConfigEntry, parse_leading_int

__all__ = [
    "ConfigEntry",
    "parse_leading_int",
]
