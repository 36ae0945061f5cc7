"""TOC Sync data models."""

from toc_sync.variants.game_type import GameType
from toc_sync.models.toc import TocFile, is_newer_interface
from toc_sync.models.reconciler import ReconcilerConfig, ReconciliationResult, RunOutcome

__all__ = [
    "GameType",
    "ReconcilerConfig",
    "ReconciliationResult",
    "RunOutcome",
    "TocFile",
    "is_newer_interface",
]
