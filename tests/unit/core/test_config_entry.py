"""
Tests pour l'objet valeur ConfigEntry et la conversion atoi.
"""

import pytest

from tvcatalog.core.value_objects import ConfigEntry, parse_leading_int


class TestParseLeadingInt:
    """Tests pour parse_leading_int (semantique atoi)."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("12", 12),
            ("  7", 7),
            ("-3", -3),
            ("+4", 4),
            ("12abc", 12),
            ("abc", 0),
            ("", 0),
            (None, 0),
        ],
    )
    def test_conversion(self, value, expected):
        assert parse_leading_int(value) == expected

    def test_default_when_unparsable(self):
        assert parse_leading_int("x", default=5) == 5


class TestConfigEntry:
    """Tests pour ConfigEntry."""

    def test_kind_is_case_insensitive(self):
        entry = ConfigEntry(kind="Channel")
        assert entry.is_kind("channel")
        assert not entry.is_kind("service")

    def test_get_str(self):
        entry = ConfigEntry(kind="channel", fields={"name": "News"})
        assert entry.get_str("name") == "News"
        assert entry.get_str("missing") is None
        assert entry.get_str("missing", "x") == "x"

    def test_get_int(self):
        entry = ConfigEntry(kind="service", fields={"prio": "2", "bad": "high"})
        assert entry.get_int("prio") == 2
        assert entry.get_int("bad") == 0
        assert entry.get_int("missing") == 0

    def test_has(self):
        entry = ConfigEntry(kind="service", fields={"dvbmux": ""})
        assert entry.has("dvbmux")
        assert not entry.has("iptv")
