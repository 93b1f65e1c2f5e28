"""
Registre des chaines.

Les chaines sont creees a la premiere reference par leur nom (insensible a la
casse), recoivent un index sequentiel et un tag, et sont placees dans le groupe
par defaut. Il n'existe pas de suppression explicite.
"""

from typing import Iterator, Optional

from loguru import logger

from tvcatalog.core.entities.channel import Channel
from tvcatalog.services.channel_groups import ChannelGroupRegistry
from tvcatalog.services.tags import TagAllocator
from tvcatalog.utils.helpers import slugify


def _name_key(name: str) -> str:
    return name.lower()


class ChannelRegistry:
    """
    Registre des chaines.

    Les chaines sont stockees par tag, avec des index secondaires par nom
    (minuscule) et par numero d'index. L'iteration suit l'ordre de creation.
    """

    def __init__(self, groups: ChannelGroupRegistry, tags: TagAllocator) -> None:
        self._groups = groups
        self._tags = tags
        self._channels: dict[int, Channel] = {}
        self._by_name: dict[str, int] = {}
        self._by_index: dict[int, int] = {}
        self._next_index = 0

    def __len__(self) -> int:
        return len(self._channels)

    def __iter__(self) -> Iterator[Channel]:
        return iter(list(self._channels.values()))

    @property
    def groups(self) -> ChannelGroupRegistry:
        return self._groups

    def find_or_create(self, name: str, create: bool) -> Optional[Channel]:
        """
        Recherche une chaine par nom, et la cree si demande.

        Args:
            name: Nom d'affichage (comparaison insensible a la casse)
            create: Si True, cree la chaine absente

        Returns:
            La chaine, ou None si elle est absente et que create est False.
        """
        tag = self._by_name.get(_name_key(name))
        if tag is not None:
            return self._channels[tag]
        if not create:
            return None

        channel = Channel(
            name=name,
            sanitized_name=slugify(name),
            index=self._next_index,
            tag=self._tags.next(),
        )
        self._channels[channel.tag] = channel
        self._by_name[_name_key(name)] = channel.tag
        self._by_index[channel.index] = channel.tag
        self._next_index += 1

        self._groups.set_group(channel, self._groups.default)
        logger.debug(
            f'Chaine creee: "{name}" (index {channel.index}, tag {channel.tag}, '
            f"slug {channel.sanitized_name})"
        )
        return channel

    def find_by_index(self, index: int) -> Optional[Channel]:
        """Recherche une chaine par index (chemin historique)."""
        tag = self._by_index.get(index)
        if tag is None:
            return None
        return self._channels[tag]

    def find_by_tag(self, tag: int) -> Optional[Channel]:
        """Recherche une chaine par tag."""
        return self._channels.get(tag)
