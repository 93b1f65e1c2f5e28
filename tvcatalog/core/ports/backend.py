"""
Interfaces ports pour les configurateurs de backends de capture.

Un configurateur transforme une entree `service` en transport configure pour une
technologie de capture donnee (DVB, IPTV, V4L). Il est selectionne par la presence
de son champ dans l'entree.
"""

from abc import ABC, abstractmethod

from tvcatalog.core.entities.transport import Transport
from tvcatalog.core.value_objects.config_entry import ConfigEntry


class IBackendConfigurator(ABC):
    """
    Interface d'un configurateur de backend.

    Attributs de classe attendus :
        name : Nom court du backend (ex: "dvb")
        field : Champ de l'entree qui designe ce backend (ex: "dvbmux")
    """

    name: str
    field: str

    def matches(self, entry: ConfigEntry) -> bool:
        """Vérifie si l'entree designe ce backend."""
        return entry.has(self.field)

    @abstractmethod
    def configure(self, entry: ConfigEntry, transport: Transport) -> Transport:
        """
        Configure le transport a partir de l'entree.

        Args:
            entry: Entree `service` complete (le champ `channel` est present)
            transport: Transport alloue, dont la priorite est deja fixee

        Returns:
            Le transport configure (nom, flux, descripteur de source).

        Raises:
            BackendConfigurationError: si l'entree ne peut pas etre configuree.
                Le transport est alors abandonne par l'appelant.
        """
        ...


class ITransportMonitor(ABC):
    """Point d'accroche pour l'initialisation de la surveillance d'un transport."""

    @abstractmethod
    def init_transport(self, transport: Transport) -> None:
        """Initialise la surveillance d'un transport nouvellement enregistre."""
        ...
