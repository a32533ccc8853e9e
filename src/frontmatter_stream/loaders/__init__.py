"""File and document loading utilities.

This subpackage handles reading documents for the frontmatter filter.

Key modules:
    - documents: Chunked file reading and document contexts
    - frontmatter: Whole-text frontmatter splitting
    - shapes: Shape factory references for the CLI
"""

from .documents import iter_chunks, load_document
from .frontmatter import split_frontmatter
from .shapes import load_shape_factory

__all__ = [
    "iter_chunks",
    "load_document",
    "split_frontmatter",
    "load_shape_factory",
]
