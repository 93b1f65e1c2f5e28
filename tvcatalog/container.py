"""
Container d'injection de dependances via dependency-injector.

Racine de composition de l'application : construit un catalogue unique et le
passe explicitement au bootstrap et aux commandes CLI.
"""

from dependency_injector import containers, providers

from .adapters.backends import build_backend_registry
from .adapters.config_source import JsonConfigSource
from .adapters.monitor import LoggingTransportMonitor
from .config import Settings
from .services.bootstrap import BootstrapLoader
from .services.catalog import Catalog


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        source = container.config_source()
        report = container.bootstrap_loader().load(source.entries())
        catalog = container.catalog()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Surveillance des transports enregistres
    transport_monitor = providers.Singleton(LoggingTransportMonitor)

    # Catalogue - singleton partage par tous les collaborateurs
    catalog = providers.Singleton(
        Catalog.create,
        tag_seed=config.provided.tag_seed,
        default_group_name=config.provided.default_group_name,
        monitor=transport_monitor,
    )

    # Backends de capture actifs, dans l'ordre de sondage
    backend_registry = providers.Singleton(build_backend_registry, settings=config)

    # Source de configuration - Factory car le chemin peut etre surcharge
    # Utiliser: container.config_source(path=Path(...))
    config_source = providers.Factory(
        JsonConfigSource,
        path=config.provided.config_file,
    )

    bootstrap_loader = providers.Factory(
        BootstrapLoader,
        catalog=catalog,
        backends=backend_registry,
    )
