"""
Entités transport (service) et flux élémentaires.

Un transport est une source de signal accordable liée à une chaine. Son contenu
(flux, descripteur de source) appartient au configurateur de backend qui l'a créé ;
le catalogue ne l'inspecte que pour la journalisation.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class StreamType(Enum):
    """Type d'un flux élémentaire.

    La valeur est le libellé utilisé dans les traces et dans le champ `streams`
    de la configuration.
    """

    MPEG2VIDEO = "mpeg2video"
    MPEG2AUDIO = "mpeg2audio"
    H264 = "h264"
    AC3 = "ac3"
    AAC = "aac"
    TELETEXT = "teletext"
    SUBTITLES = "subtitles"
    CA = "ca"
    PAT = "pat"
    PMT = "pmt"

    @property
    def label(self) -> str:
        """Libellé affiché dans les traces (ex: MPEG2VIDEO)."""
        return self.value.upper()


@dataclass(frozen=True)
class ElementaryStream:
    """
    Flux élémentaire porté par un transport.

    Attributs :
        stream_type : Type de flux
        pid : Identifiant du flux au niveau transport
        caid : Identifiant du système d'accès conditionnel (0 si en clair)
    """

    stream_type: StreamType
    pid: int
    caid: int = 0


@dataclass(eq=False)
class Transport:
    """
    Service accordable lié à une chaine.

    Attributs :
        name : Nom du service (fixé par le configurateur de backend)
        priority : Priorité, la plus basse est préférée
        channel_tag : Tag de la chaine propriétaire, fixé une seule fois à la liaison
        streams : Flux élémentaires
        backend : Nom du configurateur qui a produit le transport
        source : Descripteur propre au backend (mux, adresse multicast...)
        id : Identifiant attribué à l'enregistrement global
    """

    name: str = ""
    priority: int = 0
    channel_tag: Optional[int] = None
    streams: list[ElementaryStream] = field(default_factory=list)
    backend: Optional[str] = None
    source: dict[str, Any] = field(default_factory=dict)
    id: Optional[int] = None

    @property
    def is_linked(self) -> bool:
        """Vérifie si le transport appartient déjà à une chaine."""
        return self.channel_tag is not None
