"""Exceptions du catalogue."""


class CatalogError(Exception):
    """Erreur de base du catalogue."""


class TagSpaceExhaustedError(CatalogError):
    """L'allocateur de tags a depasse l'espace 32 bits."""


class TransportAlreadyLinkedError(CatalogError):
    """Le transport appartient deja a une chaine."""

    def __init__(self, transport_name: str, channel_tag: int) -> None:
        super().__init__(
            f"Le transport '{transport_name}' est deja lie a la chaine {channel_tag}"
        )
        self.transport_name = transport_name
        self.channel_tag = channel_tag


class BackendConfigurationError(CatalogError):
    """Un configurateur de backend n'a pas pu configurer le transport."""

    def __init__(self, backend: str, reason: str) -> None:
        super().__init__(f"[{backend}] {reason}")
        self.backend = backend
        self.reason = reason


class ConfigSourceError(CatalogError):
    """Source de configuration illisible ou mal formee."""
