"""Tests for the Variant Classifier."""

import pytest

from toc_sync.variants.classifier import (
    GAME_TYPE_PREFIXES,
    classify_interface,
    interface_prefix,
)
from toc_sync.variants.game_type import GameType


class TestInterfacePrefix:
    def test_strips_minor_digits(self):
        assert interface_prefix("110200") == "11"
        assert interface_prefix("50500") == "5"

    @pytest.mark.parametrize("value", ["", "1", "1150", "0000"])
    def test_short_values_have_no_prefix(self, value):
        assert interface_prefix(value) == ""


class TestClassifyInterface:
    @pytest.mark.parametrize("interface,expected", [
        ("110200", GameType.RETAIL),
        ("120000", GameType.RETAIL),
        ("50500", GameType.MISTS),
        ("11507", GameType.CLASSIC),
    ])
    def test_known_prefixes(self, interface, expected):
        assert classify_interface(interface) == expected

    @pytest.mark.parametrize("interface", ["40400", "30403", "100207", "990000"])
    def test_unknown_prefix_returns_none(self, interface):
        assert classify_interface(interface) is None

    @pytest.mark.parametrize("interface", ["", "5", "1150"])
    def test_short_values_are_unknown(self, interface):
        """Values of 4 characters or fewer never classify."""
        assert classify_interface(interface) is None

    def test_matches_mapping_for_every_prefix(self):
        for prefix, game_type in GAME_TYPE_PREFIXES.items():
            assert classify_interface(prefix + "0000") == game_type

    def test_mapping_is_read_only(self):
        with pytest.raises(TypeError):
            GAME_TYPE_PREFIXES["4"] = GameType.CLASSIC
