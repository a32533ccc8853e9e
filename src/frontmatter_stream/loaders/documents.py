"""
Document loading utilities.

Provides lazy, fixed-size chunk readers for files fed through the
frontmatter filter.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from frontmatter_stream.models.document import DocumentContext

DEFAULT_CHUNK_SIZE = 4096


def iter_chunks(path: str | Path,
                chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
	"""
	Yield a file's bytes in chunks of at most ``chunk_size``.

	Parameters:
		path: File to read.
		chunk_size: Maximum bytes per chunk.

	Returns:
		Iterator over the file's chunks; nothing for an empty file.
	"""
	if chunk_size <= 0:
		raise ValueError("chunk_size must be > 0")
	with Path(path).open("rb") as fh:
		while chunk := fh.read(chunk_size):
			yield chunk


def load_document(path: str | Path) -> DocumentContext:
	"""
	Create a document context for a file.

	Parameters:
		path: File path; used as the document name.

	Returns:
		DocumentContext with an empty side-channel.
	"""
	return DocumentContext(name=str(path))


__all__ = ["iter_chunks", "load_document", "DEFAULT_CHUNK_SIZE"]
