"""Tests for report rendering."""

from io import StringIO

from rich.console import Console

from toc_sync.models.reconciler import ReconciliationResult, RunOutcome
from toc_sync.models.toc import TocFile
from toc_sync.reporting.report import (
    issue_template,
    markdown_table,
    pr_template,
    summary_table,
    update_rows,
    updates_markdown,
)


def _toc(name, interface, **updates):
    return TocFile(
        file_name=name,
        directory="/addon",
        raw_content=f"## Interface: {interface}\n",
        interface_number=interface,
    ).classify().model_copy(update=updates)


def _result():
    return ReconciliationResult(
        tocs=[
            _toc("Retail.toc", "110200", new_interface_number="110205"),
            _toc("Era.toc", "11507", no_known_interface=True),
            _toc("Cata.toc", "40400"),
        ],
        outcome=RunOutcome.UPDATED,
    )


class TestMarkdownTable:
    def test_empty(self):
        assert markdown_table([]) == ""

    def test_header_separator_and_rows(self):
        table = markdown_table([["A", "B"], ["1", "2"]])
        assert table == "\n| A | B |\n| --- | --- |\n| 1 | 2 |\n"


class TestUpdateReport:
    def test_update_rows(self):
        assert update_rows(_result()) == [["Retail.toc", "Retail", "110200", "110205"]]

    def test_updates_markdown(self):
        table = updates_markdown(_result())
        assert "| TOC File | Game Type | Old Version | New Version |" in table
        assert "| Retail.toc | Retail | 110200 | 110205 |" in table
        assert "Era.toc" not in table

    def test_templates_embed_table(self):
        table = updates_markdown(_result())
        assert table in issue_template(table)
        assert table in pr_template(table)


class TestSummaryTable:
    def test_renders_every_toc(self):
        out = StringIO()
        Console(file=out, width=200, color_system=None).print(summary_table(_result()))
        text = out.getvalue()

        assert "Retail.toc" in text and "110205" in text
        assert "Unknown latest!" in text
        assert "Cata.toc" in text and "Unknown" in text
