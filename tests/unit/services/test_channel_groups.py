"""
Tests pour ChannelGroupRegistry : creation, appartenance exclusive, destruction.
"""

import pytest

from tvcatalog.core.entities.channel import Channel, ChannelGroup
from tvcatalog.services.catalog import Catalog
from tvcatalog.services.channel_groups import ChannelGroupRegistry
from tvcatalog.services.tags import TagAllocator


def _memberships(catalog: Catalog, channel: Channel) -> list[ChannelGroup]:
    """Groupes dont la liste de membres contient la chaine."""
    return [g for g in catalog.iter_groups() if channel.tag in g.channel_tags]


class TestFindOrCreate:
    """Tests pour find_or_create."""

    def test_create_and_find(self):
        registry = ChannelGroupRegistry(TagAllocator(seed=1))
        group = registry.find_or_create("Sport", True)
        assert group is not None
        assert group.name == "Sport"
        assert group.tag == 1
        assert registry.find_or_create("Sport", False) is group

    def test_absent_without_create(self):
        registry = ChannelGroupRegistry(TagAllocator(seed=1))
        assert registry.find_or_create("Sport", False) is None
        assert len(registry) == 0

    def test_name_is_case_sensitive(self):
        registry = ChannelGroupRegistry(TagAllocator(seed=1))
        sport = registry.find_or_create("Sport", True)
        assert registry.find_or_create("sport", False) is None
        assert registry.find_or_create("sport", True) is not sport

    def test_new_group_inserted_at_head(self):
        registry = ChannelGroupRegistry(TagAllocator(seed=1))
        registry.find_or_create("A", True)
        registry.find_or_create("B", True)
        assert [g.name for g in registry] == ["B", "A"]

    def test_find_by_tag(self):
        registry = ChannelGroupRegistry(TagAllocator(seed=7))
        group = registry.find_or_create("News", True)
        assert registry.find_by_tag(group.tag) is group
        assert registry.find_by_tag(9999) is None


class TestDefaultGroup:
    """Tests pour le groupe par defaut."""

    def test_init_default_is_protected(self):
        registry = ChannelGroupRegistry(TagAllocator(seed=1))
        default = registry.init_default()
        assert default.name == "Uncategorized"
        assert default.protected
        assert registry.default is default

    def test_default_created_lazily(self):
        registry = ChannelGroupRegistry(TagAllocator(seed=1), default_group_name="Divers")
        assert registry.default.name == "Divers"
        assert registry.default.protected

    def test_destroy_default_is_noop(self, catalog: Catalog):
        """La destruction du groupe par defaut est sans effet."""
        channel = catalog.channels.find_or_create("News", True)
        default = catalog.groups.default

        catalog.groups.destroy(default)

        assert catalog.find_group_by_tag(default.tag) is default
        assert default.channel_tags == [channel.tag]
        # Le groupe peut toujours recevoir des chaines
        other = catalog.channels.find_or_create("Sport", True)
        assert other.tag in default.channel_tags


class TestSetGroup:
    """Tests pour set_group : appartenance exclusive."""

    def test_new_channel_in_default_group(self, catalog: Catalog):
        channel = catalog.channels.find_or_create("News", True)
        assert catalog.group_of(channel) is catalog.groups.default

    def test_move_between_groups(self, catalog: Catalog):
        """Une chaine deplacee entre deux groupes n'appartient qu'a un seul groupe."""
        channel = catalog.channels.find_or_create("News", True)
        first = catalog.groups.find_or_create("Info", True)
        second = catalog.groups.find_or_create("Favoris", True)

        catalog.groups.set_group(channel, first)
        assert _memberships(catalog, channel) == [first]

        catalog.groups.set_group(channel, second)
        assert _memberships(catalog, channel) == [second]
        assert catalog.group_of(channel) is second

    def test_unregistered_group_rejected(self, catalog: Catalog):
        channel = catalog.channels.find_or_create("News", True)
        stray = ChannelGroup(name="Stray", tag=12345)

        with pytest.raises(ValueError, match="Stray"):
            catalog.groups.set_group(channel, stray)

        assert stray.channel_tags == []
        assert catalog.group_of(channel) is catalog.groups.default
        assert first.channel_tags == []

    def test_same_group_moves_to_tail(self, catalog: Catalog):
        group = catalog.groups.find_or_create("Info", True)
        a = catalog.channels.find_or_create("A", True)
        b = catalog.channels.find_or_create("B", True)
        catalog.groups.set_group(a, group)
        catalog.groups.set_group(b, group)

        catalog.groups.set_group(a, group)

        assert group.channel_tags == [b.tag, a.tag]
        assert _memberships(catalog, a) == [group]


class TestDestroy:
    """Tests pour destroy."""

    def test_members_move_to_default(self, catalog: Catalog):
        default = catalog.groups.default
        group = catalog.groups.find_or_create("Info", True)
        a = catalog.channels.find_or_create("A", True)
        b = catalog.channels.find_or_create("B", True)
        catalog.groups.set_group(a, group)
        catalog.groups.set_group(b, group)

        catalog.groups.destroy(group)

        assert catalog.find_group_by_tag(group.tag) is None
        assert group not in list(catalog.iter_groups())
        assert default.channel_tags == [a.tag, b.tag]
        assert catalog.group_of(a) is default
        assert _memberships(catalog, b) == [default]

    def test_destroy_unknown_group_is_ignored(self, catalog: Catalog):
        stray = ChannelGroup(name="Stray", tag=12345)
        catalog.groups.destroy(stray)
        assert catalog.find_group_by_tag(12345) is None

    @pytest.mark.parametrize("count", [0, 1, 5])
    def test_every_channel_keeps_exactly_one_group(self, catalog: Catalog, count: int):
        group = catalog.groups.find_or_create("Temp", True)
        channels = [catalog.channels.find_or_create(f"C{i}", True) for i in range(count)]
        for channel in channels:
            catalog.groups.set_group(channel, group)

        catalog.groups.destroy(group)

        for channel in channels:
            assert len(_memberships(catalog, channel)) == 1
