"""
TOC Directory — the set of .toc files a run reconciles.

Updated by: nothing (files are written through TocFile.persist)
Queried by: Reconciler + API
"""

import logging
from pathlib import Path
from typing import List

from toc_sync.errors import TocFileReadError
from toc_sync.models.toc import TocFile

logger = logging.getLogger(__name__)


class TocDirectory:
    """A directory of addon manifests, filtered by extension."""

    def __init__(self, directory: str, extension: str = ".toc"):
        self.directory = directory
        self.extension = extension

    def list_files(self) -> List[str]:
        """File names with the configured extension, sorted."""
        try:
            entries = list(Path(self.directory).iterdir())
        except OSError as e:
            raise TocFileReadError(f"Could not list {self.directory}: {e}") from e
        return sorted(
            p.name for p in entries
            if p.is_file() and p.name.endswith(self.extension)
        )

    def load_all(self) -> List[TocFile]:
        """Load every manifest in the directory."""
        tocs = [TocFile.load(self.directory, name) for name in self.list_files()]
        logger.debug(f"Loaded {len(tocs)} toc file(s) from {self.directory}")
        return tocs
