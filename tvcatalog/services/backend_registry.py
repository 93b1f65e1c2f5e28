"""
Registre des configurateurs de backends de capture.

Les configurateurs sont sondes dans l'ordre de leur enregistrement : le premier
dont le champ est present dans l'entree est retenu. Un nouveau backend s'ajoute
par `register()` sans modifier le bootstrap.
"""

from typing import Iterator, Optional

from tvcatalog.core.ports.backend import IBackendConfigurator
from tvcatalog.core.value_objects.config_entry import ConfigEntry


class BackendConfiguratorRegistry:
    """Liste ordonnee de configurateurs de backends."""

    def __init__(self, configurators: Optional[list[IBackendConfigurator]] = None) -> None:
        self._configurators: list[IBackendConfigurator] = []
        for configurator in configurators or []:
            self.register(configurator)

    def __len__(self) -> int:
        return len(self._configurators)

    def __iter__(self) -> Iterator[IBackendConfigurator]:
        return iter(self._configurators)

    def register(self, configurator: IBackendConfigurator) -> None:
        """
        Ajoute un configurateur en fin d'ordre de sondage.

        Raises:
            ValueError: si un configurateur du meme nom est deja enregistre.
        """
        if any(c.name == configurator.name for c in self._configurators):
            raise ValueError(f"Configurateur deja enregistre: {configurator.name}")
        self._configurators.append(configurator)

    def probe(self, entry: ConfigEntry) -> Optional[IBackendConfigurator]:
        """Retourne le premier configurateur dont le champ est present dans l'entree."""
        for configurator in self._configurators:
            if configurator.matches(entry):
                return configurator
        return None

    @property
    def names(self) -> list[str]:
        return [c.name for c in self._configurators]
