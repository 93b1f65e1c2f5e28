"""
Tests d'integration du chargement du catalogue.

Ces tests utilisent le container reel : Settings, source JSON, backends
DVB/IPTV/V4L et surveillance journalisee.
"""

import json
import threading
from pathlib import Path

import pytest

from tvcatalog.container import Container
from tvcatalog.services.bootstrap import EntryOutcome


@pytest.fixture
def integration_container(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Container:
    """Container configure sur un fichier JSON temporaire."""
    config_file = tmp_path / "catalog.json"
    monkeypatch.setenv("TVCATALOG_CONFIG_FILE", str(config_file))
    monkeypatch.setenv("TVCATALOG_TAG_SEED", "1000")
    monkeypatch.setenv("TVCATALOG_DVB_MUXES", '["mux-1", "mux-2"]')
    monkeypatch.delenv("TVCATALOG_ENABLED_BACKENDS", raising=False)
    return Container()


def _write_config(container: Container, blocks: list[dict]) -> None:
    path = container.config().config_file
    path.write_text(json.dumps(blocks), encoding="utf-8")


class TestBootstrapIntegration:
    """Chargement de bout en bout depuis un fichier JSON."""

    def test_single_channel_single_service(self, integration_container: Container):
        """Une chaine News et un service DVB de priorite 2 : un transport sur News."""
        _write_config(integration_container, [
            {"channel": {"name": "News"}},
            {"service": {"channel": "News", "prio": 2, "dvbmux": "mux-1"}},
        ])

        entries = integration_container.config_source().entries()
        report = integration_container.bootstrap_loader().load(entries)
        catalog = integration_container.catalog()

        channels = list(catalog.iter_channels())
        assert [c.name for c in channels] == ["News"]
        assert [t.priority for t in channels[0].transports] == [2]
        assert report.counts[EntryOutcome.REGISTERED] == 2
        assert integration_container.transport_monitor().monitored == ["mux-1/News"]

    def test_mixed_configuration(self, integration_container: Container):
        _write_config(integration_container, [
            {"channel": {"name": "France 2", "teletext-rundown": 888}},
            {"channel": {"name": "Arte"}},
            {"channel": {"teletext-rundown": 1}},
            {"service": {"channel": "France 2", "prio": 5, "dvbmux": "mux-2",
                         "streams": ["mpeg2video:120", "mpeg2audio:130"]}},
            {"service": {"channel": "France 2", "prio": 1, "iptv": "eth0",
                         "group": "239.10.0.2", "port": 5500}},
            {"service": {"channel": "Arte", "dvbmux": "mux-9"}},
            {"service": {"channel": "Arte", "v4lmux": "video0", "frequency": 543250}},
            {"service": {"dvbmux": "mux-1"}},
        ])

        entries = integration_container.config_source().entries()
        report = integration_container.bootstrap_loader().load(entries)
        catalog = integration_container.catalog()

        france2 = catalog.find_channel_by_name("france 2")
        arte = catalog.find_channel_by_name("ARTE")

        assert france2.sanitized_name == "france-2"
        assert france2.teletext_rundown == 888
        assert [t.backend for t in france2.transports] == ["iptv", "dvb"]
        assert [t.backend for t in arte.transports] == ["v4l"]
        assert len(catalog.linker) == 3

        # Le multiplex mux-9 n'est pas declare : echec de backend
        failed = [r for r in report.results if r.outcome is EntryOutcome.BACKEND_FAILED]
        assert [(r.reference, r.backend) for r in failed] == [("Arte", "dvb")]
        assert report.count(EntryOutcome.SKIPPED) == 2

        # Index et tags
        assert catalog.find_channel_by_index(0) is france2
        assert catalog.find_channel_by_index(1) is arte
        assert catalog.find_channel_by_tag(1000) is france2
        default = catalog.groups.default
        assert catalog.find_group_by_tag(default.tag) is default
        assert default.channel_tags == [france2.tag, arte.tag]

    def test_concurrent_readers_under_lock(self, integration_container: Container):
        """Des lecteurs concurrents tenant le verrou voient un catalogue coherent."""
        _write_config(integration_container, [
            {"channel": {"name": f"Chaine {i}"}} for i in range(50)
        ])
        integration_container.bootstrap_loader().load(
            integration_container.config_source().entries()
        )
        catalog = integration_container.catalog()
        errors: list[str] = []

        def reader():
            for i in range(50):
                with catalog.lock:
                    channel = catalog.find_channel_by_index(i)
                    if channel is None or catalog.group_of(channel) is None:
                        errors.append(f"index {i}")

        def mover():
            group = None
            for i in range(50):
                with catalog.lock:
                    if group is None:
                        group = catalog.groups.find_or_create("Favoris", True)
                    catalog.groups.set_group(catalog.find_channel_by_index(i), group)
            with catalog.lock:
                catalog.groups.destroy(group)

        threads = [threading.Thread(target=reader) for _ in range(4)]
        threads.append(threading.Thread(target=mover))
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert len(catalog.groups.default.channel_tags) == 50
