"""
Terminal summary rendering.

Provides Rich tables summarising documents streamed through the
frontmatter filter.
"""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from frontmatter_stream.core.pipeline import DocumentOutcome
from frontmatter_stream.models.metadata import MetadataRecord


def _describe(outcome: DocumentOutcome) -> tuple[str, str]:
	"""Return (fmtype, shape) display strings for an outcome."""
	value = outcome.frontmatter
	if value is None:
		return "", ""
	if isinstance(value, MetadataRecord):
		return value.discriminator, "untyped"
	fmtype = getattr(value, "fmtype", "") or ""
	return str(fmtype), type(value).__name__


def build_summary_table(outcomes: list[DocumentOutcome]) -> Table:
	"""
	Build a table with one row per document.

	Parameters:
		outcomes: Results from run_document/run_documents.

	Returns:
		Rich Table ready for printing.
	"""
	table = Table(box=box.ROUNDED, expand=True, show_header=True)
	table.add_column("Document", overflow="fold")
	table.add_column("fmtype")
	table.add_column("Shape")
	table.add_column("Template")
	table.add_column("Body bytes", justify="right")
	table.add_column("Status")

	for outcome in outcomes:
		fmtype, shape = _describe(outcome)
		template = outcome.document.ctx.get("template") or ""
		if outcome.errors:
			status = Text("error: " + "; ".join(outcome.errors), style="red")
		elif outcome.frontmatter is None:
			status = Text("no frontmatter", style="dim")
		else:
			status = Text("ok", style="green")
		table.add_row(outcome.document.name, fmtype, shape, str(template),
		              str(len(outcome.body)), status)
	return table


def print_summary(outcomes: list[DocumentOutcome],
                  console: Console | None = None) -> None:
	"""Render the summary table to the console."""
	console = console or Console()
	console.print(build_summary_table(outcomes))


__all__ = ["build_summary_table", "print_summary"]
