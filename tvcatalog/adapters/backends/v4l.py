"""Configurateur de services V4L (capture analogique)."""

from typing import Iterable, Optional

from pydantic import Field

from tvcatalog.adapters.backends.base import FieldsConfigurator, ServiceFields
from tvcatalog.core.entities.transport import Transport
from tvcatalog.core.exceptions import BackendConfigurationError


class V4lServiceFields(ServiceFields):
    """Champs d'une entree `service` V4L."""

    v4lmux: str = Field(min_length=1)
    frequency: Optional[int] = Field(default=None, gt=0)  # kHz


class V4lMuxConfigurator(FieldsConfigurator):
    """Configure les transports issus d'un peripherique V4L."""

    name = "v4l"
    field = "v4lmux"
    fields_model = V4lServiceFields

    def __init__(self, known_devices: Optional[Iterable[str]] = None) -> None:
        self._known_devices = frozenset(known_devices or ())

    def apply(self, fields: V4lServiceFields, transport: Transport) -> Transport:
        if self._known_devices and fields.v4lmux not in self._known_devices:
            raise BackendConfigurationError(self.name, f"peripherique inconnu: {fields.v4lmux}")

        if fields.frequency is not None:
            transport.name = f"V4L: {fields.v4lmux} @ {fields.frequency}"
        else:
            transport.name = f"V4L: {fields.v4lmux}"
        transport.source = {"device": fields.v4lmux, "frequency": fields.frequency}
        return transport
