"""Sous-package CLI commands - re-exporte les commandes publiques."""

from tvcatalog.adapters.cli.commands.catalog_commands import (
    channels,
    groups,
    load,
    show,
)

__all__ = [
    "channels",
    "groups",
    "load",
    "show",
]
