"""
Reconciler — one pass over a directory of .toc files.

  LOAD → FETCH (once) → COMPARE → PARTITION → (UP_TO_DATE | UPDATES_FOUND | UPDATES_PENDING → UPDATED)

Any read, fetch or write failure aborts the run. Files already written
before a write failure stay written.
"""

import logging
from typing import List, Optional

from toc_sync.errors import NoTocFilesFound
from toc_sync.models.reconciler import ReconcilerConfig, ReconciliationResult, RunOutcome
from toc_sync.models.toc import TocFile
from toc_sync.reference.client import ReferenceClient
from toc_sync.reference.extractor import extract_interface
from toc_sync.store.directory import TocDirectory

logger = logging.getLogger(__name__)


def compare_with_reference(tocs: List[TocFile], document: str) -> List[TocFile]:
    """Propose updates for every classified toc file. Order is preserved."""
    compared = []
    for toc in tocs:
        if toc.game_type is None:
            compared.append(toc)
            continue

        latest = extract_interface(document, toc.game_type)
        if latest is None:
            logger.warning(
                f"No known latest interface for {toc.game_type.value} ({toc.file_name})"
            )
            compared.append(toc.mark_unknown_latest())
        else:
            compared.append(toc.propose(latest))
    return compared


class Reconciler:
    """Reconciles declared interface numbers against the reference document."""

    def __init__(
        self,
        config: Optional[ReconcilerConfig] = None,
        client: Optional[ReferenceClient] = None,
    ):
        self.config = config or ReconcilerConfig()
        self.client = client or ReferenceClient()
        self.directory = TocDirectory(self.config.toc_directory, self.config.toc_extension)

    def load(self) -> List[TocFile]:
        """Load all toc files. Raises NoTocFilesFound when there are none."""
        logger.info(f"Checking for toc files in directory: {self.config.toc_directory}")
        tocs = self.directory.load_all()
        if not tocs:
            raise NoTocFilesFound(self.config.toc_directory)
        logger.info(f"Found {len(tocs)} .toc file(s)")
        return tocs

    def run(
        self,
        fail_on_updates: Optional[bool] = None,
        persist: bool = True,
    ) -> ReconciliationResult:
        """
        Run a single reconciliation.
        `fail_on_updates` overrides the configured flag for this run.
        With `persist=False` nothing is written; pass the result to apply().
        """
        if fail_on_updates is None:
            fail_on_updates = self.config.fail_on_updates

        tocs = self.load()
        document = self.client.fetch(self.config.reference_url)

        logger.info("Comparing toc interface numbers with latest versions")
        tocs = compare_with_reference(tocs, document)
        pending = [t for t in tocs if t.needs_update]

        if not pending:
            logger.info("All toc files are up to date. No interface updates needed.")
            return ReconciliationResult(tocs=tocs, outcome=RunOutcome.UP_TO_DATE)

        logger.info(f"Found {len(pending)} toc file(s) needing interface updates")

        # Fail-fast wins over persisting
        if fail_on_updates:
            reason = (
                f"{len(pending)} toc file(s) need interface updates: "
                f"{', '.join(t.file_name for t in pending)}"
            )
            logger.error(reason)
            return ReconciliationResult(
                tocs=tocs,
                outcome=RunOutcome.UPDATES_FOUND,
                failure_reason=reason,
            )

        result = ReconciliationResult(tocs=tocs, outcome=RunOutcome.UPDATES_PENDING)
        return self.apply(result) if persist else result

    def apply(self, result: ReconciliationResult) -> ReconciliationResult:
        """
        Persist every pending update of `result`.
        A write failure aborts; files written before it stay written.
        """
        if result.outcome != RunOutcome.UPDATES_PENDING:
            return result

        written = []
        for toc in result.needs_update:
            if toc.persist():
                written.append(str(toc.path))

        logger.info("All toc files updated")
        return result.model_copy(update={"outcome": RunOutcome.UPDATED, "written": written})
