"""
Source de configuration JSON.

Le fichier contient une liste ordonnee de blocs a cle unique :

    [
        {"channel": {"name": "News", "teletext-rundown": 100}},
        {"service": {"channel": "News", "prio": 2, "dvbmux": "mux-1"}}
    ]

Les valeurs sont converties en texte : le catalogue interprete lui-meme les
champs numeriques.
"""

import json
from pathlib import Path
from typing import Any, Iterator

from loguru import logger

from tvcatalog.core.exceptions import ConfigSourceError
from tvcatalog.core.value_objects.config_entry import ConfigEntry


def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, list):
        return ",".join(_to_text(v) for v in value)
    return str(value)


def parse_entries(data: Any) -> list[ConfigEntry]:
    """
    Convertit un document JSON decode en entrees de configuration.

    Raises:
        ConfigSourceError: si la structure n'est pas une liste de blocs a cle unique.
    """
    if not isinstance(data, list):
        raise ConfigSourceError("La configuration doit etre une liste de blocs")

    entries = []
    for position, block in enumerate(data):
        if not isinstance(block, dict) or len(block) != 1:
            raise ConfigSourceError(f"Bloc {position}: un objet a cle unique est attendu")
        kind, fields = next(iter(block.items()))
        if not isinstance(fields, dict):
            raise ConfigSourceError(f"Bloc {position} ({kind}): un objet de champs est attendu")
        entries.append(
            ConfigEntry(
                kind=kind,
                fields={str(k): _to_text(v) for k, v in fields.items() if v is not None},
            )
        )
    return entries


class JsonConfigSource:
    """Lit les entrees de configuration depuis un fichier JSON."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path).expanduser()

    def entries(self) -> list[ConfigEntry]:
        """
        Lit et convertit le fichier.

        Raises:
            ConfigSourceError: si le fichier est absent, illisible ou mal forme.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigSourceError(f"Impossible de lire {self.path}: {e}") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ConfigSourceError(f"JSON invalide dans {self.path}: {e}") from e

        entries = parse_entries(data)
        logger.debug(f"{len(entries)} entrees lues depuis {self.path}")
        return entries

    def __iter__(self) -> Iterator[ConfigEntry]:
        return iter(self.entries())
