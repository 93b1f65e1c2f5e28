"""
Liaison des transports aux chaines.

Les transports d'une chaine sont maintenus tries par priorite croissante ; a
priorite egale, l'ordre d'insertion est conserve. L'enregistrement global est
le seul chemin par lequel un transport devient visible hors du bootstrap.
"""

from bisect import insort
from typing import Iterator, Optional

from loguru import logger

from tvcatalog.core.entities.channel import Channel
from tvcatalog.core.entities.transport import ElementaryStream, Transport
from tvcatalog.core.exceptions import TransportAlreadyLinkedError
from tvcatalog.core.ports.backend import ITransportMonitor
from tvcatalog.services.tags import TagAllocator
from tvcatalog.utils.helpers import describe_ca_system, to_printable


def _priority(transport: Transport) -> int:
    return transport.priority


def stream_label(stream: ElementaryStream) -> str:
    """Libelle d'un flux : systeme CA s'il est chiffre, type de flux sinon."""
    if stream.caid != 0:
        return describe_ca_system(stream.caid)
    return stream.stream_type.label


class TransportLinker:
    """
    Lie les transports aux chaines et tient l'ensemble global des transports.

    Args:
        tags: Allocateur des identifiants de transports enregistres
        monitor: Point d'accroche de surveillance, appele a l'enregistrement
    """

    def __init__(
        self,
        tags: TagAllocator,
        monitor: Optional[ITransportMonitor] = None,
    ) -> None:
        self._tags = tags
        self._monitor = monitor
        self._transports: list[Transport] = []

    def __len__(self) -> int:
        return len(self._transports)

    def __iter__(self) -> Iterator[Transport]:
        return iter(list(self._transports))

    def link(self, transport: Transport, channel: Channel) -> None:
        """
        Lie un transport a une chaine en respectant l'ordre des priorites.

        Raises:
            TransportAlreadyLinkedError: si le transport appartient deja a une chaine.
        """
        if transport.is_linked:
            raise TransportAlreadyLinkedError(transport.name, transport.channel_tag)

        transport.channel_tag = channel.tag
        insort(channel.transports, transport, key=_priority)

        logger.debug(
            f'Added service "{transport.name}" for channel "{to_printable(channel.name)}"'
        )
        for stream in transport.streams:
            logger.debug(f"   Stream [{stream_label(stream)}] - pid {stream.pid}")

    def register(self, transport: Transport, channel: Channel) -> None:
        """
        Lie le transport, initialise sa surveillance et l'ajoute a l'ensemble global.

        L'identifiant est alloue avant toute modification : si l'allocation
        echoue, ni la chaine ni l'ensemble global ne sont touches.

        Raises:
            TransportAlreadyLinkedError: si le transport appartient deja a une chaine.
            TagSpaceExhaustedError: si l'espace des identifiants est epuise.
        """
        if transport.is_linked:
            raise TransportAlreadyLinkedError(transport.name, transport.channel_tag)
        transport_id = self._tags.next()

        self.link(transport, channel)
        if self._monitor is not None:
            self._monitor.init_transport(transport)
        transport.id = transport_id
        self._transports.insert(0, transport)

    def find_by_id(self, transport_id: int) -> Optional[Transport]:
        """Recherche un transport enregistre par identifiant."""
        for transport in self._transports:
            if transport.id == transport_id:
                return transport
        return None
