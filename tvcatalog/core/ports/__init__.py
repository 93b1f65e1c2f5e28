"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

- IBackendConfigurator : Configuration d'un transport pour une technologie de capture
- ITransportMonitor : Initialisation de la surveillance d'un transport enregistré
"""

from tvcatalog.core.ports.backend import IBackendConfigurator, ITransportMonitor

__all__ = [
    "IBackendConfigurator",
    "ITransportMonitor",
]
