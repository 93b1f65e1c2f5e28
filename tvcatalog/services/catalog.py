"""
Agregat du catalogue : registres, liaison des transports et verrou partage.

Le catalogue est construit une fois par la racine de composition (container) et
passe explicitement au bootstrap et aux collaborateurs. Les registres ne prennent
pas le verrou eux-memes : l'appelant doit tenir `catalog.lock` autour de tout
appel, lecture comprise.

Utilisation :
    with catalog.lock:
        channel = catalog.find_channel_by_name("News")
"""

import threading
from typing import Iterator, Optional

from tvcatalog.core.entities.channel import Channel, ChannelGroup
from tvcatalog.core.entities.transport import Transport
from tvcatalog.core.ports.backend import ITransportMonitor
from tvcatalog.services.channel_groups import ChannelGroupRegistry
from tvcatalog.services.channels import ChannelRegistry
from tvcatalog.services.tags import TagAllocator
from tvcatalog.services.transport_linker import TransportLinker
from tvcatalog.utils.constants import DEFAULT_GROUP_NAME


class Catalog:
    """
    Catalogue en memoire des chaines, groupes et transports.

    Attributs :
        groups : Registre des groupes de chaines
        channels : Registre des chaines
        linker : Liaison des transports et ensemble global des transports
        lock : Verrou unique du processus, tenu par les appelants
    """

    def __init__(
        self,
        groups: ChannelGroupRegistry,
        channels: ChannelRegistry,
        linker: TransportLinker,
    ) -> None:
        self.groups = groups
        self.channels = channels
        self.linker = linker
        self.lock = threading.RLock()

    @classmethod
    def create(
        cls,
        tag_seed: Optional[int] = None,
        default_group_name: str = DEFAULT_GROUP_NAME,
        monitor: Optional[ITransportMonitor] = None,
    ) -> "Catalog":
        """
        Construit un catalogue vide avec un allocateur de tags par espace de noms.

        Avec une graine explicite, les tags sont deterministes (tests, diagnostics).
        """
        groups = ChannelGroupRegistry(TagAllocator(tag_seed), default_group_name)
        channels = ChannelRegistry(groups, TagAllocator(tag_seed))
        linker = TransportLinker(TagAllocator(tag_seed), monitor)
        return cls(groups=groups, channels=channels, linker=linker)

    # Lectures exposees aux collaborateurs (UI, enregistreur, EPG)

    def find_channel_by_name(self, name: str) -> Optional[Channel]:
        return self.channels.find_or_create(name, False)

    def find_channel_by_index(self, index: int) -> Optional[Channel]:
        return self.channels.find_by_index(index)

    def find_channel_by_tag(self, tag: int) -> Optional[Channel]:
        return self.channels.find_by_tag(tag)

    def find_group_by_tag(self, tag: int) -> Optional[ChannelGroup]:
        return self.groups.find_by_tag(tag)

    def group_of(self, channel: Channel) -> Optional[ChannelGroup]:
        return self.groups.group_of(channel)

    def members_of(self, group: ChannelGroup) -> list[Channel]:
        """Chaines membres d'un groupe, dans l'ordre du groupe."""
        members = []
        for tag in group.channel_tags:
            channel = self.channels.find_by_tag(tag)
            if channel is not None:
                members.append(channel)
        return members

    def iter_channels(self) -> Iterator[Channel]:
        return iter(self.channels)

    def iter_groups(self) -> Iterator[ChannelGroup]:
        return iter(self.groups)

    def iter_transports(self) -> Iterator[Transport]:
        return iter(self.linker)
