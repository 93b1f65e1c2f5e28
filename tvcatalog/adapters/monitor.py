"""Surveillance des transports : implementation qui journalise et memorise."""

from loguru import logger

from tvcatalog.core.entities.transport import Transport
from tvcatalog.core.ports.backend import ITransportMonitor


class LoggingTransportMonitor(ITransportMonitor):
    """Memorise les transports surveilles et trace leur initialisation."""

    def __init__(self) -> None:
        self.monitored: list[str] = []

    def init_transport(self, transport: Transport) -> None:
        self.monitored.append(transport.name)
        logger.debug(f'Surveillance initialisee pour "{transport.name}"')
