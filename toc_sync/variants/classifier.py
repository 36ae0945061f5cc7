"""
Variant Classifier — maps an interface number to its game type.

An interface number is a fixed-width string: the last 4 digits carry the
minor/patch version, everything before them is the major version prefix.

    110200 -> "11" -> Retail
     50500 -> "5"  -> Mists
     11507 -> "1"  -> Classic
"""

from types import MappingProxyType
from typing import Mapping, Optional

from toc_sync.variants.game_type import GameType

MINOR_DIGITS = 4

GAME_TYPE_PREFIXES: Mapping[str, GameType] = MappingProxyType({
    "12": GameType.RETAIL,
    "11": GameType.RETAIL,
    "5": GameType.MISTS,
    "1": GameType.CLASSIC,
})


def interface_prefix(interface_number: str) -> str:
    """Strip the fixed-width minor/patch digits. Short values yield ''."""
    return interface_number[:-MINOR_DIGITS] if len(interface_number) > MINOR_DIGITS else ""


def classify_interface(interface_number: str) -> Optional[GameType]:
    """Return the game type for an interface number, or None when the prefix is unmapped."""
    if not interface_number:
        return None
    return GAME_TYPE_PREFIXES.get(interface_prefix(interface_number))
