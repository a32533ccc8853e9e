"""User interface components.

This subpackage provides terminal output rendering for the CLI.

Key modules:
    - summary: Rich table summarising processed documents
"""

from frontmatter_stream.ui.summary import build_summary_table, print_summary

__all__ = ["build_summary_table", "print_summary"]
