"""
Utilitaires partages pour les commandes CLI de tvcatalog.

Ce module fournit :
- console : instance Rich Console partagee
- cli_state : options globales de verbosite (renseignees par le callback principal)
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container
- load_catalog : bootstrap du catalogue depuis la source de configuration
"""

from contextlib import contextmanager
from functools import wraps
from pathlib import Path
from typing import Optional

import typer
from loguru import logger as loguru_logger
from rich.console import Console
from rich.markup import escape

from tvcatalog.container import Container
from tvcatalog.core.exceptions import ConfigSourceError
from tvcatalog.services.bootstrap import BootstrapReport
from tvcatalog.services.catalog import Catalog

# Console globale pour tous les affichages
console = Console()

# Etat global pour les options de verbosite
cli_state = {"verbose": 0}


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Sans effet en mode verbeux (-v).

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    if cli_state["verbose"]:
        yield
        return
    loguru_logger.disable("tvcatalog")
    try:
        yield
    finally:
        loguru_logger.enable("tvcatalog")


def with_container(func):
    """
    Decorateur qui injecte un container neuf en premier argument.

    Usage:
        @with_container
        def _my_command(container, ...):
            config = container.config()
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        return func(Container(), *args, **kwargs)
    return wrapper


def load_catalog(
    container: Container,
    config_path: Optional[Path] = None,
) -> tuple[Catalog, BootstrapReport]:
    """
    Charge le catalogue depuis la source de configuration.

    Args:
        container: Container de l'application
        config_path: Fichier de configuration (defaut: config_file des Settings)

    Returns:
        Le catalogue peuple et le bilan du chargement.

    Raises:
        typer.Exit: code 1 si la configuration est illisible ou mal formee.
    """
    if config_path is not None:
        source = container.config_source(path=config_path)
    else:
        source = container.config_source()

    try:
        entries = source.entries()
    except ConfigSourceError as e:
        console.print(f"[red]Erreur: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e

    with suppress_loguru():
        report = container.bootstrap_loader().load(entries)
    return container.catalog(), report
