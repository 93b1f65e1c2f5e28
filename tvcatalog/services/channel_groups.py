"""
Registre des groupes de chaines.

Le registre possede les groupes et l'appartenance des chaines : chaque chaine
est membre d'un et un seul groupe. Un changement de groupe detache toujours
la chaine de son groupe precedent avant de l'ajouter au nouveau.
"""

from typing import Iterator, Optional

from loguru import logger

from tvcatalog.core.entities.channel import Channel, ChannelGroup
from tvcatalog.services.tags import TagAllocator
from tvcatalog.utils.constants import DEFAULT_GROUP_NAME


class ChannelGroupRegistry:
    """
    Registre des groupes de chaines et du groupe par defaut.

    Les groupes sont stockes par tag ; l'ordre d'iteration place le dernier
    groupe cree en tete. L'appartenance est indexee par tag de chaine.
    """

    def __init__(
        self,
        tags: TagAllocator,
        default_group_name: str = DEFAULT_GROUP_NAME,
    ) -> None:
        self._tags = tags
        self._default_group_name = default_group_name
        self._groups: dict[int, ChannelGroup] = {}
        self._order: list[int] = []
        self._membership: dict[int, int] = {}
        self._default: Optional[ChannelGroup] = None

    def __len__(self) -> int:
        return len(self._groups)

    def __iter__(self) -> Iterator[ChannelGroup]:
        return (self._groups[tag] for tag in self._order)

    def find_or_create(self, name: str, create: bool) -> Optional[ChannelGroup]:
        """
        Recherche un groupe par nom exact, et le cree si demande.

        Args:
            name: Nom du groupe (comparaison sensible a la casse)
            create: Si True, cree le groupe absent

        Returns:
            Le groupe, ou None s'il est absent et que create est False.
        """
        for group in self:
            if group.name == name:
                return group
        if not create:
            return None

        group = ChannelGroup(name=name, tag=self._tags.next())
        self._groups[group.tag] = group
        self._order.insert(0, group.tag)
        logger.debug(f'Groupe cree: "{name}" (tag {group.tag})')
        return group

    def init_default(self) -> ChannelGroup:
        """Cree (ou retrouve) le groupe par defaut et le protege contre la destruction."""
        group = self.find_or_create(self._default_group_name, True)
        group.protected = True
        self._default = group
        return group

    @property
    def default(self) -> ChannelGroup:
        """Groupe par defaut, initialise a la premiere utilisation si necessaire."""
        if self._default is None:
            return self.init_default()
        return self._default

    def set_group(self, channel: Channel, group: ChannelGroup) -> None:
        """
        Place une chaine dans un groupe.

        La chaine est retiree de son groupe courant puis ajoutee en queue du
        nouveau. Replacer une chaine dans son propre groupe la deplace en queue.

        Raises:
            ValueError: si le groupe n'appartient pas au registre.
        """
        if self._groups.get(group.tag) is not group:
            raise ValueError(f"Groupe non enregistre: '{group.name}'")
        self._move(channel.tag, group)

    def _move(self, channel_tag: int, group: ChannelGroup) -> None:
        current_tag = self._membership.get(channel_tag)
        if current_tag is not None:
            self._groups[current_tag].channel_tags.remove(channel_tag)

        group.channel_tags.append(channel_tag)
        self._membership[channel_tag] = group.tag

    def group_of(self, channel: Channel) -> Optional[ChannelGroup]:
        """Retourne le groupe d'une chaine, ou None si elle n'est pas enregistree."""
        group_tag = self._membership.get(channel.tag)
        if group_tag is None:
            return None
        return self._groups[group_tag]

    def destroy(self, group: ChannelGroup) -> None:
        """
        Detruit un groupe en renvoyant ses membres dans le groupe par defaut.

        Sans effet sur le groupe protege. Les membres sont deplaces un par un,
        en commencant par la tete de liste.
        """
        if group.protected or group is self._default:
            logger.debug(f'Groupe "{group.name}" protege, destruction ignoree')
            return
        if self._groups.get(group.tag) is not group:
            return

        default = self.default
        while group.channel_tags:
            self._move(group.channel_tags[0], default)

        del self._groups[group.tag]
        self._order.remove(group.tag)
        logger.debug(f'Groupe detruit: "{group.name}"')

    def find_by_tag(self, tag: int) -> Optional[ChannelGroup]:
        """Recherche un groupe par tag."""
        return self._groups.get(tag)
