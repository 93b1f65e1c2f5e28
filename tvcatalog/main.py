"""
Point d'entrée CLI de tvcatalog.

Configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from .adapters.cli.commands import channels, groups, load, show
from .adapters.cli.helpers import cli_state
from .config import Settings
from .container import Container
from .logging_config import configure_logging

__version__ = "0.1.0"

app = typer.Typer(
    name="tvcatalog",
    help="Catalogue des chaines, groupes et services TV",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv, -vvv)"
        ),
    ] = 0,
) -> None:
    """tvcatalog - Catalogue des chaines TV."""
    cli_state["verbose"] = verbose


# Monter les commandes de consultation du catalogue
app.command()(load)
app.command()(channels)
app.command()(groups)
app.command()(show)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration tvcatalog")
    typer.echo(f"Configuration : {config.config_file}")
    typer.echo(f"Groupe par défaut : {config.default_group_name}")
    typer.echo(f"Backends actifs : {', '.join(config.enabled_backends) or 'aucun'}")
    typer.echo(f"Multiplex DVB connus : {', '.join(config.dvb_muxes) or 'tous'}")
    typer.echo(f"Périphériques V4L connus : {', '.join(config.v4l_devices) or 'tous'}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"tvcatalog v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(settings)

    logger.info("Démarrage de tvcatalog", version=__version__)

    app()


if __name__ == "__main__":
    main()
