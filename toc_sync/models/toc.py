"""
TOC File — one addon manifest and its interface reconciliation state.

Processing is a pipeline of pure steps, each returning a new frozen value:

    TocFile.load() -> classify() -> propose(latest) | mark_unknown_latest()

Only load() and persist() touch the filesystem.
"""

import logging
import re
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict

from toc_sync.errors import InvalidInterfaceNumber, TocFileReadError, TocFileWriteError
from toc_sync.variants.classifier import classify_interface
from toc_sync.variants.game_type import GameType

logger = logging.getLogger(__name__)

INTERFACE_PATTERN = re.compile(r"## Interface: ([0-9]+)")


def _check_digits(value: str, label: str) -> None:
    if not value.isdigit() or not value.isascii():
        raise InvalidInterfaceNumber(f"{label} interface number {value!r} is not a digit string")


def is_newer_interface(current: str, latest: str) -> bool:
    """
    True when `latest` is a newer interface number than `current`.

    Interface numbers are fixed-width within a game type, so equal-length
    strings compare lexicographically. Unequal lengths would misorder
    ("9" > "10"), so those fall back to numeric comparison.
    """
    _check_digits(current, "Current")
    _check_digits(latest, "Latest")

    if len(current) != len(latest):
        logger.warning(
            f"Interface numbers {current} and {latest} differ in width; comparing numerically"
        )
        return int(latest) > int(current)
    return latest > current


class TocFile(BaseModel):
    """A World of Warcraft addon .toc file."""

    model_config = ConfigDict(frozen=True)

    file_name: str
    directory: str
    raw_content: str
    interface_number: str = ""                   # "" when no interface line exists
    game_type: Optional[GameType] = None         # None when the prefix is unmapped
    new_interface_number: Optional[str] = None   # Set only when strictly newer
    no_known_interface: bool = False             # Game type known, reference has no value

    @property
    def path(self) -> Path:
        return Path(self.directory) / self.file_name

    @property
    def needs_update(self) -> bool:
        return self.new_interface_number is not None

    @classmethod
    def load(cls, directory: str, file_name: str) -> "TocFile":
        """Read a .toc file and parse and classify its interface number."""
        path = Path(directory) / file_name
        try:
            # newline="" keeps CRLF files byte-identical on write-back
            with open(path, encoding="utf-8", newline="") as f:
                raw_content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise TocFileReadError(f"Could not read {path}: {e}") from e

        match = INTERFACE_PATTERN.search(raw_content)
        toc = cls(
            file_name=file_name,
            directory=str(directory),
            raw_content=raw_content,
            interface_number=match.group(1) if match else "",
        )
        return toc.classify()

    def classify(self) -> "TocFile":
        """Derive the game type from the interface number prefix."""
        return self.model_copy(update={"game_type": classify_interface(self.interface_number)})

    def propose(self, latest: str) -> "TocFile":
        """Return a copy carrying `latest` as the new interface number if it is newer."""
        if not self.interface_number:
            return self
        if is_newer_interface(self.interface_number, latest):
            return self.model_copy(update={"new_interface_number": latest})
        return self.model_copy(update={"new_interface_number": None})

    def mark_unknown_latest(self) -> "TocFile":
        return self.model_copy(update={"no_known_interface": True})

    def updated_content(self) -> str:
        """The file text with the first interface line rewritten to the proposal."""
        if self.new_interface_number is None:
            return self.raw_content
        return INTERFACE_PATTERN.sub(
            f"## Interface: {self.new_interface_number}", self.raw_content, count=1
        )

    def persist(self) -> bool:
        """
        Write the proposed interface number back to disk.

        No-op without a proposal. Always rewrites from the content read at
        load time, so repeated calls produce the same file.
        Returns whether the file was written.
        """
        if self.new_interface_number is None:
            return False

        try:
            with open(self.path, "w", encoding="utf-8", newline="") as f:
                f.write(self.updated_content())
        except OSError as e:
            raise TocFileWriteError(f"Could not write {self.path}: {e}") from e

        logger.info(
            f"Updated {self.file_name}: {self.interface_number} -> {self.new_interface_number}"
        )
        return True
