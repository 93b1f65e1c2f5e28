"""
Fixtures pytest partagees pour les tests tvcatalog.

Ce module contient les fixtures communes utilisees dans les tests:
- Catalogue vide avec tags deterministes
- Registre de backends reel et mock de configurateur
- Settings de test avec chemins temporaires
- Capture des messages loguru
"""

from pathlib import Path
from typing import Iterator
from unittest.mock import MagicMock

import pytest
from loguru import logger

from tvcatalog.adapters.backends import DvbMuxConfigurator, IptvConfigurator, V4lMuxConfigurator
from tvcatalog.config import Settings
from tvcatalog.core.entities.transport import Transport
from tvcatalog.core.ports.backend import IBackendConfigurator, ITransportMonitor
from tvcatalog.core.value_objects import ConfigEntry
from tvcatalog.services.backend_registry import BackendConfiguratorRegistry
from tvcatalog.services.catalog import Catalog

# Graine fixe : les tags de chaque espace commencent a 100
TAG_SEED = 100


@pytest.fixture
def mock_monitor() -> MagicMock:
    """Mock de ITransportMonitor pour verifier l'appel a l'enregistrement."""
    return MagicMock(spec=ITransportMonitor)


@pytest.fixture
def catalog(mock_monitor: MagicMock) -> Catalog:
    """Catalogue vide, tags deterministes a partir de TAG_SEED."""
    return Catalog.create(tag_seed=TAG_SEED, monitor=mock_monitor)


@pytest.fixture
def backends() -> BackendConfiguratorRegistry:
    """Registre reel DVB, IPTV, V4L sans restriction de multiplex ni de peripherique."""
    return BackendConfiguratorRegistry(
        [DvbMuxConfigurator(), IptvConfigurator(), V4lMuxConfigurator()]
    )


@pytest.fixture
def mock_configurator() -> MagicMock:
    """
    Mock de IBackendConfigurator repondant au champ `mockmux`.

    Par defaut, configure() nomme le transport d'apres la chaine et le retourne.
    """
    mock = MagicMock(spec=IBackendConfigurator)
    mock.name = "mock"
    mock.field = "mockmux"
    mock.matches.side_effect = lambda entry: entry.has("mockmux")

    def default_configure(entry: ConfigEntry, transport: Transport) -> Transport:
        transport.name = f"mock/{entry.get_str('channel')}"
        transport.backend = "mock"
        return transport

    mock.configure.side_effect = default_configure
    return mock


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test avec chemins temporaires."""
    return Settings(
        config_file=tmp_path / "catalog.json",
        tag_seed=TAG_SEED,
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Capture les messages loguru (niveau DEBUG) emis pendant le test."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
