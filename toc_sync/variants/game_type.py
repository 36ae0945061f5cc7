"""Game Type — the closed set of World of Warcraft product lines."""

from enum import Enum


class GameType(str, Enum):
    """Value is the exact label used in the reference document's game type cell."""
    RETAIL = "Retail"
    MISTS = "Mists"
    CLASSIC = "Classic"
