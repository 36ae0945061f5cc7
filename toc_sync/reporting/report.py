"""Reporting — markdown tables, issue/PR bodies and the console summary."""

from typing import List, Sequence

from rich.table import Table

from toc_sync.models.reconciler import ReconciliationResult
from toc_sync.models.toc import TocFile

UPDATE_HEADERS = ["TOC File", "Game Type", "Old Version", "New Version"]


def _game_type_label(toc: TocFile) -> str:
    return toc.game_type.value if toc.game_type else "Unknown"


def markdown_table(rows: Sequence[Sequence[str]]) -> str:
    """First row is the header. Returns '' for no rows."""
    if not rows:
        return ""
    header, body = rows[0], rows[1:]
    lines = [
        "| " + " | ".join(header) + " |",
        "| " + " | ".join("---" for _ in header) + " |",
    ]
    lines.extend("| " + " | ".join(row) + " |" for row in body)
    return "\n" + "\n".join(lines) + "\n"


def update_rows(result: ReconciliationResult) -> List[List[str]]:
    """(file, game type, old, new) for every toc file needing an update."""
    return [
        [t.file_name, _game_type_label(t), t.interface_number, t.new_interface_number]
        for t in result.needs_update
    ]


def updates_markdown(result: ReconciliationResult) -> str:
    return markdown_table([UPDATE_HEADERS, *update_rows(result)])


def issue_template(table: str) -> str:
    return (
        "---\n"
        "title: Update TOC interface versions\n"
        "labels: toc, automated\n"
        "---\n\n"
        "The following TOC files declare an interface version older than the "
        "latest published one:\n"
        f"{table}\n"
        "Bump the `## Interface:` line in each file and test the addon on the "
        "matching game client.\n"
    )


def pr_template(table: str) -> str:
    return (
        "## Update TOC interface versions\n\n"
        "This pull request bumps the `## Interface:` line of the following TOC files "
        "to the latest published interface version:\n"
        f"{table}"
    )


def summary_table(result: ReconciliationResult) -> Table:
    """Console table of every toc file and its newest known interface."""
    table = Table(title="TOC interface versions")
    for header in ("TOC File", "Game Type", "Current Interface Version", "Newest Interface Version"):
        table.add_column(header, style="yellow" if header == "TOC File" else None)

    for toc in result.tocs:
        if toc.needs_update:
            newest = f"[bright_green]{toc.new_interface_number}[/]"
        elif toc.no_known_interface:
            newest = "[red]Unknown latest![/]"
        else:
            newest = toc.interface_number
        table.add_row(toc.file_name, _game_type_label(toc), toc.interface_number, newest)
    return table
