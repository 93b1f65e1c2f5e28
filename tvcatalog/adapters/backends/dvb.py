"""
Configurateur de services DVB.

Un service DVB est designe par le champ `dvbmux` (nom du multiplex). Quand une
liste de multiplex connus est fournie, un multiplex absent de la liste fait
echouer la configuration.
"""

from typing import Iterable, Optional

from pydantic import Field

from tvcatalog.adapters.backends.base import FieldsConfigurator, ServiceFields
from tvcatalog.core.entities.transport import Transport
from tvcatalog.core.exceptions import BackendConfigurationError


class DvbServiceFields(ServiceFields):
    """Champs d'une entree `service` DVB."""

    dvbmux: str = Field(min_length=1)
    sid: Optional[int] = Field(default=None, ge=1, le=0xFFFF)


class DvbMuxConfigurator(FieldsConfigurator):
    """Configure les transports issus d'un multiplex DVB."""

    name = "dvb"
    field = "dvbmux"
    fields_model = DvbServiceFields

    def __init__(self, known_muxes: Optional[Iterable[str]] = None) -> None:
        self._known_muxes = frozenset(known_muxes or ())

    def apply(self, fields: DvbServiceFields, transport: Transport) -> Transport:
        if self._known_muxes and fields.dvbmux not in self._known_muxes:
            raise BackendConfigurationError(self.name, f"multiplex inconnu: {fields.dvbmux}")

        transport.name = f"{fields.dvbmux}/{fields.channel}"
        transport.source = {"mux": fields.dvbmux}
        if fields.sid is not None:
            transport.source["sid"] = fields.sid
        return transport
