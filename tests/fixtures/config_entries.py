"""Constructeurs d'entrees de configuration pour les tests."""

from tvcatalog.core.value_objects import ConfigEntry


def channel_entry(**fields) -> ConfigEntry:
    """Entree `channel` ; les `_` des noms de champs deviennent des `-`."""
    return ConfigEntry(
        kind="channel",
        fields={k.replace("_", "-"): str(v) for k, v in fields.items()},
    )


def service_entry(**fields) -> ConfigEntry:
    """Entree `service` avec champs texte."""
    return ConfigEntry(kind="service", fields={k: str(v) for k, v in fields.items()})
