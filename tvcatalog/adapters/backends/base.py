"""
Elements communs aux configurateurs de backends.

- FieldsConfigurator : configurateur dont les champs sont valides par un modele pydantic
- parse_streams : lecture du champ `streams` (type:pid[:caid], separes par des virgules)
"""

from abc import abstractmethod
from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from tvcatalog.core.entities.transport import ElementaryStream, StreamType, Transport
from tvcatalog.core.exceptions import BackendConfigurationError
from tvcatalog.core.ports.backend import IBackendConfigurator
from tvcatalog.core.value_objects.config_entry import ConfigEntry


class ServiceFields(BaseModel):
    """Champs communs a toutes les entrees `service`."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    channel: str
    streams: Optional[str] = None


def _parse_number(value: str) -> int:
    # Accepte le decimal et l'hexadecimal (0x...)
    return int(value, 16) if value.lower().startswith("0x") else int(value)


def parse_streams(value: Optional[str]) -> list[ElementaryStream]:
    """
    Lit la declaration des flux d'un service.

    Format : "type:pid[:caid]" separes par des virgules, nombres decimaux ou
    hexadecimaux. Ex: "mpeg2video:512,mpeg2audio:0x28a,ca:0x17:0x1801"

    Raises:
        ValueError: si un element est mal forme ou si le type est inconnu.
    """
    if not value:
        return []

    streams = []
    for token in value.split(","):
        token = token.strip()
        if not token:
            continue
        parts = token.split(":")
        if len(parts) not in (2, 3):
            raise ValueError(f"Flux mal forme: '{token}'")
        stream_type = StreamType(parts[0].strip().lower())
        pid = _parse_number(parts[1].strip())
        caid = _parse_number(parts[2].strip()) if len(parts) == 3 else 0
        streams.append(ElementaryStream(stream_type=stream_type, pid=pid, caid=caid))
    return streams


def _summarize(error: ValidationError) -> str:
    messages = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "entree"
        messages.append(f"{location}: {detail['msg']}")
    return "; ".join(messages)


class FieldsConfigurator(IBackendConfigurator):
    """
    Configurateur dont les champs d'entree sont valides par un modele pydantic.

    Les sous-classes declarent `fields_model` et implementent `apply()`.
    """

    fields_model: ClassVar[type[ServiceFields]] = ServiceFields

    def configure(self, entry: ConfigEntry, transport: Transport) -> Transport:
        try:
            fields = self.fields_model.model_validate(entry.fields)
        except ValidationError as e:
            raise BackendConfigurationError(self.name, _summarize(e)) from e

        try:
            streams = parse_streams(fields.streams)
        except ValueError as e:
            raise BackendConfigurationError(self.name, str(e)) from e

        transport = self.apply(fields, transport)
        transport.streams = streams
        transport.backend = self.name
        return transport

    @abstractmethod
    def apply(self, fields: ServiceFields, transport: Transport) -> Transport:
        """Renseigne le nom et le descripteur de source du transport."""
        ...
