"""
Entités chaine et groupe de chaines.

Les appartenances (groupe -> chaines) sont stockées sous forme de listes
ordonnées de tags : aucune entité ne référence directement une autre entité
possédée par un registre différent.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from tvcatalog.core.entities.transport import Transport


@dataclass(eq=False)
class Channel:
    """
    Chaine de diffusion visible par l'utilisateur.

    Une chaine est créée à la première référence par son nom (insensible à la casse)
    et vit jusqu'à l'arrêt du processus.

    Attributs :
        name : Nom d'affichage tel que configuré
        sanitized_name : Slug dérivé du nom ([a-z0-9-] uniquement)
        index : Numéro séquentiel attribué à la création (à partir de 0, jamais réutilisé)
        tag : Identifiant unique pour la durée du processus
        transports : Transports liés, triés par priorité croissante
        epg_events : File d'événements EPG (remplie par un collaborateur externe)
        teletext_rundown : Page télétexte de conducteur, si configurée
    """

    name: str
    sanitized_name: str
    index: int
    tag: int
    transports: list[Transport] = field(default_factory=list)
    epg_events: list[Any] = field(default_factory=list)
    teletext_rundown: Optional[int] = None


@dataclass(eq=False)
class ChannelGroup:
    """
    Partition nommée et exclusive des chaines.

    Attributs :
        name : Nom unique (comparaison exacte, sensible à la casse)
        tag : Identifiant unique pour la durée du processus
        channel_tags : Tags des chaines membres, dans l'ordre d'ajout
        protected : True uniquement pour le groupe par défaut (indestructible)
    """

    name: str
    tag: int
    channel_tags: list[int] = field(default_factory=list)
    protected: bool = False
