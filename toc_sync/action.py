"""
GitHub Action entrypoint.

Reads action inputs from the environment, runs one reconciliation, prints a
summary and publishes the job outputs:

  tocs-updated   number of toc files needing an update
  tocs-pr        pull request body with the update table
  tocs-issue     issue body with the update table
"""

import logging
import os
import sys
from pathlib import Path
from typing import Mapping, Optional
from uuid import uuid4

from rich.console import Console

from toc_sync.errors import TocSyncError
from toc_sync.models.reconciler import ReconcilerConfig, ReconciliationResult
from toc_sync.reconciler.loop import Reconciler
from toc_sync.reference.client import ReferenceClient
from toc_sync.reporting.report import (
    issue_template,
    pr_template,
    summary_table,
    updates_markdown,
)

logger = logging.getLogger(__name__)

ISSUE_TEMPLATE_FILE = "issue-template.md"


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def set_output(name: str, value, env: Mapping[str, str]) -> None:
    """Append a job output to $GITHUB_OUTPUT. Skipped outside of Actions."""
    output_file = env.get("GITHUB_OUTPUT")
    if not output_file:
        logger.debug(f"GITHUB_OUTPUT not set; dropping output {name}")
        return

    value = str(value)
    with open(output_file, "a", encoding="utf-8") as f:
        if "\n" in value:
            delimiter = f"ghadelimiter_{uuid4().hex}"
            f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
        else:
            f.write(f"{name}={value}\n")


def publish(
    result: ReconciliationResult,
    config: ReconcilerConfig,
    env: Mapping[str, str],
) -> None:
    """Write job outputs and, when configured, the issue template file."""
    if not result.needs_update:
        set_output("tocs-updated", 0, env)
        return

    table = updates_markdown(result)
    set_output("tocs-updated", result.tocs_updated, env)

    if config.create_issue:
        path = Path(config.action_directory) / ISSUE_TEMPLATE_FILE
        logger.info(f"Creating issue template file {path}")
        path.write_text(issue_template(table), encoding="utf-8")

    set_output("tocs-pr", pr_template(table), env)
    set_output("tocs-issue", issue_template(table), env)


def run(
    env: Optional[Mapping[str, str]] = None,
    client: Optional[ReferenceClient] = None,
    console: Optional[Console] = None,
) -> int:
    """
    Run the action. Returns the process exit code.

    Outputs and the issue template are written before any toc file, so a
    publishing failure leaves every toc file untouched.
    """
    env = os.environ if env is None else env
    console = console or Console()

    try:
        config = ReconcilerConfig.from_env(env)
        reconciler = Reconciler(config, client)
        result = reconciler.run(persist=False)
    except TocSyncError as e:
        logger.error(str(e))
        return 1

    console.print(summary_table(result))

    if result.failed:
        logger.error("Failing job due to fail-job-when-updates-found being set to true.")
        return 1

    try:
        publish(result, config, env)
    except OSError as e:
        logger.error(f"Could not publish job outputs: {e}")
        return 1

    try:
        reconciler.apply(result)
    except TocSyncError as e:
        logger.error(str(e))
        return 1
    return 0


def main() -> None:
    configure_logging()
    sys.exit(run())


if __name__ == "__main__":
    main()
