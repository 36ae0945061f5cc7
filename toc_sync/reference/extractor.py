"""
Reference Extractor — latest interface number per game type.

The reference page lists one row per game type:

    Game type | Expansion | Version | Number | Date | Interface

Extraction is a two-phase text scan, not an HTML parse:
  1. locate an exact <td>{label}</td> cell,
  2. scan forward to the end of that row for the first <code>digits</code>
     (ASCII 0-9 only).

The markup format is pinned by EXTRACTOR_VERSION and the fixture in
tests/fixtures/toc_format.html. Bump both together when the page changes.
"""

import re
from typing import Dict, Optional

from toc_sync.variants.game_type import GameType

EXTRACTOR_VERSION = 1

ROW_END = "</tr>"
CODE_VALUE = re.compile(r"<code>([0-9]+)</code>")


def _label_cell(label: str) -> "re.Pattern[str]":
    # Cell delimiters make this an exact match: "Classic" never hits "Mists Classic"
    return re.compile(rf"<td>{re.escape(label)}</td>")


def _row_window(document: str, start: int) -> str:
    end = document.find(ROW_END, start)
    return document[start:] if end == -1 else document[start:end]


def extract_interface(document: str, game_type: GameType) -> Optional[str]:
    """Return the first interface number in the row labelled `game_type`, or None."""
    for cell in _label_cell(game_type.value).finditer(document):
        match = CODE_VALUE.search(_row_window(document, cell.end()))
        if match:
            return match.group(1)
    return None


def extract_all(document: str) -> Dict[GameType, Optional[str]]:
    """Latest interface number for every known game type."""
    return {game_type: extract_interface(document, game_type) for game_type in GameType}
