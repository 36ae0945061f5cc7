"""
TOC Sync API — FastAPI endpoints.

Exposes the reconciler over HTTP for:
- Health checks
- Inspecting the loaded toc files
- Triggering a reconciliation run
"""

from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from toc_sync.errors import NoTocFilesFound, ReferenceFetchError, TocSyncError
from toc_sync.models.reconciler import ReconcilerConfig, ReconciliationResult
from toc_sync.reconciler.loop import Reconciler
from toc_sync.reference.client import ReferenceClient
from toc_sync.reporting.report import updates_markdown


# --- Request/Response Models ---

class ReconcileRequest(BaseModel):
    fail_on_updates: Optional[bool] = None


def _result_payload(result: ReconciliationResult) -> dict:
    return {
        "outcome": result.outcome.value,
        "failure_reason": result.failure_reason,
        "tocs_updated": result.tocs_updated,
        "written": result.written,
        "needs_update": [t.file_name for t in result.needs_update],
        "unknown_latest": [t.file_name for t in result.unknown_latest],
        "up_to_date": [t.file_name for t in result.up_to_date],
        "markdown": updates_markdown(result),
        "tocs": [t.model_dump(mode="json", exclude={"raw_content"}) for t in result.tocs],
    }


# --- Application Factory ---

def create_app(
    config: Optional[ReconcilerConfig] = None,
    client: Optional[ReferenceClient] = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="TOC Sync API",
        description="Keeps addon .toc interface versions current",
        version="0.1.0",
    )

    reconciler = Reconciler(config or ReconcilerConfig(), client)
    app.state.reconciler = reconciler

    @app.get("/health")
    def health():
        return {"status": "ok", "toc_directory": reconciler.config.toc_directory}

    @app.get("/tocs")
    def list_tocs():
        """Loaded and classified toc files. Does not fetch the reference."""
        try:
            tocs = reconciler.load()
        except NoTocFilesFound as e:
            raise HTTPException(404, str(e))
        except TocSyncError as e:
            raise HTTPException(500, str(e))
        return [t.model_dump(mode="json", exclude={"raw_content"}) for t in tocs]

    @app.post("/reconcile")
    def reconcile(req: Optional[ReconcileRequest] = None):
        """Run one reconciliation."""
        fail_on_updates = req.fail_on_updates if req else None
        try:
            result = reconciler.run(fail_on_updates=fail_on_updates)
        except NoTocFilesFound as e:
            raise HTTPException(404, str(e))
        except ReferenceFetchError as e:
            raise HTTPException(502, str(e))
        except TocSyncError as e:
            raise HTTPException(500, str(e))
        return _result_payload(result)

    return app
