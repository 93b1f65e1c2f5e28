"""
Commandes CLI de consultation du catalogue (load, channels, groups, show).

Le catalogue vit en memoire : chaque commande le reconstruit depuis la source
de configuration avant de l'afficher.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from tvcatalog.adapters.cli.helpers import console, load_catalog, with_container
from tvcatalog.core.entities.channel import Channel
from tvcatalog.core.entities.transport import Transport
from tvcatalog.services.bootstrap import EntryOutcome
from tvcatalog.services.catalog import Catalog
from tvcatalog.services.transport_linker import stream_label

ConfigArgument = Annotated[
    Optional[Path],
    typer.Argument(help="Fichier de configuration (defaut: config_file de la config)"),
]

_OUTCOME_STYLES = {
    EntryOutcome.REGISTERED: "green",
    EntryOutcome.SKIPPED: "yellow",
    EntryOutcome.BACKEND_FAILED: "red",
}


def _format_transport(transport: Transport) -> str:
    backend = transport.backend or "?"
    return f"[{transport.priority}] {escape(transport.name)} [dim]({backend})[/dim]"


def _group_name(catalog: Catalog, channel: Channel) -> str:
    group = catalog.group_of(channel)
    return escape(group.name) if group is not None else "-"


def load(config: ConfigArgument = None) -> None:
    """Charge la configuration et affiche le bilan par entree."""
    _load(config)


@with_container
def _load(container, config: Optional[Path]) -> None:
    catalog, report = load_catalog(container, config)

    table = Table(title="Chargement du catalogue")
    table.add_column("Bloc")
    table.add_column("Chaine")
    table.add_column("Backend")
    table.add_column("Resultat")
    table.add_column("Motif", style="dim")

    for result in report.results:
        style = _OUTCOME_STYLES[result.outcome]
        table.add_row(
            result.kind,
            result.reference or "-",
            result.backend or "-",
            f"[{style}]{result.outcome.value}[/{style}]",
            result.reason or "",
        )
    console.print(table)

    with catalog.lock:
        console.print(
            f"\n[bold]{len(catalog.channels)}[/bold] chaines, "
            f"[bold]{len(catalog.linker)}[/bold] services, "
            f"[bold]{len(catalog.groups)}[/bold] groupes"
        )


def channels(config: ConfigArgument = None) -> None:
    """Liste les chaines du catalogue par index."""
    _channels(config)


@with_container
def _channels(container, config: Optional[Path]) -> None:
    catalog, _ = load_catalog(container, config)

    table = Table(title="Chaines")
    table.add_column("Index", justify="right")
    table.add_column("Tag", justify="right", style="dim")
    table.add_column("Nom", style="bold")
    table.add_column("Slug", style="cyan")
    table.add_column("Groupe")
    table.add_column("Services", justify="right")

    with catalog.lock:
        for channel in sorted(catalog.iter_channels(), key=lambda c: c.index):
            table.add_row(
                str(channel.index),
                str(channel.tag),
                escape(channel.name),
                channel.sanitized_name,
                _group_name(catalog, channel),
                str(len(channel.transports)),
            )
    console.print(table)


def groups(config: ConfigArgument = None) -> None:
    """Affiche l'arborescence groupes -> chaines -> services."""
    _groups(config)


@with_container
def _groups(container, config: Optional[Path]) -> None:
    catalog, _ = load_catalog(container, config)

    tree = Tree("[bold]Catalogue[/bold]")
    with catalog.lock:
        for group in catalog.iter_groups():
            label = f"[bold cyan]{escape(group.name)}[/bold cyan] [dim](tag {group.tag})[/dim]"
            if group.protected:
                label += " [dim]par defaut[/dim]"
            group_branch = tree.add(label)
            for channel in catalog.members_of(group):
                channel_branch = group_branch.add(
                    f"{escape(channel.name)} [dim]#{channel.index}[/dim]"
                )
                for transport in channel.transports:
                    channel_branch.add(_format_transport(transport))
    console.print(tree)


def show(
    name: Annotated[str, typer.Argument(help="Nom de la chaine (insensible a la casse)")],
    config: ConfigArgument = None,
) -> None:
    """Affiche le detail d'une chaine et de ses services."""
    _show(name, config)


@with_container
def _show(container, name: str, config: Optional[Path]) -> None:
    catalog, _ = load_catalog(container, config)

    with catalog.lock:
        channel = catalog.find_channel_by_name(name)
        if channel is None:
            console.print(f"[red]Chaine introuvable: {escape(name)}[/red]")
            raise typer.Exit(1)

        console.print(f"[bold]{escape(channel.name)}[/bold]")
        console.print(f"  Slug : {channel.sanitized_name}")
        console.print(f"  Index : {channel.index}")
        console.print(f"  Tag : {channel.tag}")
        console.print(f"  Groupe : {_group_name(catalog, channel)}")
        if channel.teletext_rundown is not None:
            console.print(f"  Teletext rundown : {channel.teletext_rundown}")

        if not channel.transports:
            console.print("  [dim]Aucun service[/dim]")
            return

        table = Table(title="Services")
        table.add_column("Prio", justify="right")
        table.add_column("Service")
        table.add_column("Backend")
        table.add_column("Flux")
        for transport in channel.transports:
            streams = ", ".join(
                f"{stream_label(stream)} pid {stream.pid}" for stream in transport.streams
            )
            table.add_row(
                str(transport.priority),
                escape(transport.name),
                transport.backend or "-",
                streams or "-",
            )
        console.print(table)
