"""
Objet valeur pour une entrée de configuration.

Une entrée est un bloc nommé (`channel`, `service`...) contenant des champs
texte. Les noms de champs font partie du contrat, pas le format de stockage.
"""

import re
from dataclasses import dataclass, field
from typing import Optional

# Entier en tete de chaine, comme atoi()
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_leading_int(value: Optional[str], default: int = 0) -> int:
    """
    Convertit le début d'une chaine en entier.

    Reproduit atoi() : les espaces initiaux sont ignorés, la conversion s'arrête
    au premier caractère non numérique, et une chaine sans chiffre donne `default`.

    Ex: "12abc" -> 12, "abc" -> 0, None -> 0
    """
    if value is None:
        return default
    match = _LEADING_INT.match(value)
    if match is None:
        return default
    return int(match.group(1))


@dataclass(frozen=True)
class ConfigEntry:
    """
    Entrée de configuration déclarative.

    Attributs :
        kind : Type de bloc (comparé sans tenir compte de la casse)
        fields : Champs de l'entrée, valeurs sous forme de texte
    """

    kind: str
    fields: dict[str, str] = field(default_factory=dict)

    def is_kind(self, kind: str) -> bool:
        """Vérifie le type du bloc, sans tenir compte de la casse."""
        return self.kind.lower() == kind.lower()

    def has(self, key: str) -> bool:
        """Vérifie la présence d'un champ."""
        return key in self.fields

    def get_str(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Retourne la valeur texte d'un champ, ou `default` s'il est absent."""
        return self.fields.get(key, default)

    def get_int(self, key: str, default: int = 0) -> int:
        """Retourne la valeur entière d'un champ (sémantique atoi)."""
        return parse_leading_int(self.fields.get(key), default)
