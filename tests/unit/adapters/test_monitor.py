"""
Tests pour LoggingTransportMonitor.
"""

from tvcatalog.adapters.monitor import LoggingTransportMonitor
from tvcatalog.core.entities.transport import Transport
from tvcatalog.services.catalog import Catalog


class TestLoggingTransportMonitor:
    """Tests pour la surveillance journalisee."""

    def test_records_registered_transports(self, log_messages: list[str]):
        monitor = LoggingTransportMonitor()
        catalog = Catalog.create(tag_seed=1, monitor=monitor)
        channel = catalog.channels.find_or_create("News", True)

        catalog.linker.register(Transport(name="mux/News"), channel)

        assert monitor.monitored == ["mux/News"]
        assert 'Surveillance initialisee pour "mux/News"' in log_messages

    def test_link_alone_not_monitored(self):
        monitor = LoggingTransportMonitor()
        catalog = Catalog.create(tag_seed=1, monitor=monitor)
        channel = catalog.channels.find_or_create("News", True)

        catalog.linker.link(Transport(name="mux/News"), channel)

        assert monitor.monitored == []
