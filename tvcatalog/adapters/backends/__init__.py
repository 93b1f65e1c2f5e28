"""
Configurateurs des backends de capture.

L'ordre de sondage par defaut est DVB, IPTV, V4L.

Exports :
- DvbMuxConfigurator : champ `dvbmux`
- IptvConfigurator : champ `iptv`
- V4lMuxConfigurator : champ `v4lmux`
- build_backend_registry : registre construit depuis les Settings
"""

from tvcatalog.adapters.backends.dvb import DvbMuxConfigurator
from tvcatalog.adapters.backends.iptv import IptvConfigurator
from tvcatalog.adapters.backends.v4l import V4lMuxConfigurator
from tvcatalog.config import Settings
from tvcatalog.services.backend_registry import BackendConfiguratorRegistry


def build_backend_registry(settings: Settings) -> BackendConfiguratorRegistry:
    """Construit le registre des backends actifs, dans l'ordre de sondage fixe."""
    registry = BackendConfiguratorRegistry()
    if settings.backend_enabled("dvb"):
        registry.register(DvbMuxConfigurator(known_muxes=settings.dvb_muxes))
    if settings.backend_enabled("iptv"):
        registry.register(IptvConfigurator())
    if settings.backend_enabled("v4l"):
        registry.register(V4lMuxConfigurator(known_devices=settings.v4l_devices))
    return registry


__all__ = [
    "DvbMuxConfigurator",
    "IptvConfigurator",
    "V4lMuxConfigurator",
    "build_backend_registry",
]
