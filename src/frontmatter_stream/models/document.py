"""
Document and stream input models.

Defines the per-document context handed to the filter by the host
pipeline, the explicit chunk input protocol, and the filter's result.
"""

from __future__ import annotations

from pathlib import PurePath
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field

from frontmatter_stream.errors import DecodeError


class DocumentContext(BaseModel):
	"""
	Opaque per-document object supplied by the host pipeline.

	Attributes:
		name: Document name, typically a relative path. Identifies the
			document for the lifetime of its stream.
		ctx: Key/value side-channel shared between pipeline stages.
	"""

	name: str = Field(description="Document name or path")
	ctx: dict[str, Any] = Field(default_factory=dict,
	                            description="Side-channel values")

	@property
	def extension(self) -> str:
		"""Return the lowercased file extension including the dot."""
		return PurePath(self.name).suffix.lower()


class Data(BaseModel):
	"""A chunk of document bytes."""

	model_config = ConfigDict(frozen=True)

	payload: bytes


class EndOfDocument:
	"""Signals that no further chunks follow for the current document."""

	_instance: "EndOfDocument | None" = None

	def __new__(cls) -> "EndOfDocument":
		if cls._instance is None:
			cls._instance = super().__new__(cls)
		return cls._instance

	def __repr__(self) -> str:
		return "END_OF_DOCUMENT"


END_OF_DOCUMENT: Final = EndOfDocument()

StreamItem = Data | EndOfDocument


class FilterResult(BaseModel):
	"""
	Outcome of feeding one item to the filter.

	Attributes:
		document: The document context the output belongs to, or None
			when the host passed no document.
		output: Bytes to hand to the next stage; None while buffering.
		error: Decode failure for this document, if any. Output is still
			delivered alongside an error.
	"""

	model_config = ConfigDict(arbitrary_types_allowed=True)

	document: DocumentContext | None = None
	output: bytes | None = None
	error: DecodeError | None = None

	@property
	def buffering(self) -> bool:
		"""Return True when the filter is holding bytes back."""
		return self.document is not None and self.output is None


__all__ = [
    "DocumentContext",
    "Data",
    "EndOfDocument",
    "END_OF_DOCUMENT",
    "StreamItem",
    "FilterResult",
]
