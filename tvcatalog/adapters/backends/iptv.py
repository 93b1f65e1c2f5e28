"""
Configurateur de services IPTV.

Le champ `iptv` designe l'interface reseau de reception ; l'entree doit aussi
fournir l'adresse de groupe (`group`) et le port UDP (`port`).
"""

from pydantic import Field, IPvAnyAddress

from tvcatalog.adapters.backends.base import FieldsConfigurator, ServiceFields
from tvcatalog.core.entities.transport import Transport


class IptvServiceFields(ServiceFields):
    """Champs d'une entree `service` IPTV."""

    iptv: str = Field(min_length=1)
    group: IPvAnyAddress
    port: int = Field(ge=1, le=65535)


class IptvConfigurator(FieldsConfigurator):
    """Configure les transports recus en multicast IP."""

    name = "iptv"
    field = "iptv"
    fields_model = IptvServiceFields

    def apply(self, fields: IptvServiceFields, transport: Transport) -> Transport:
        transport.name = f"IPTV: {fields.channel} ({fields.group}:{fields.port})"
        transport.source = {
            "interface": fields.iptv,
            "group": str(fields.group),
            "port": fields.port,
        }
        return transport
