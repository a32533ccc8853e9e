"""
Host-side document driver.

Streams a document's chunks through a FrontmatterFilter, signals end of
document until the filter is drained, and collects the pass-through body.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, Field

from frontmatter_stream.core.filter import FrontmatterFilter
from frontmatter_stream.models.document import (
    END_OF_DOCUMENT,
    Data,
    DocumentContext,
)
from frontmatter_stream.utils.logging import get_logger

logger = get_logger(__name__)

# Upper bound on end-of-document signals per document.
MAX_DRAIN_ROUNDS = 16


class DocumentOutcome(BaseModel):
	"""
	Result of streaming one document through the filter.

	Attributes:
		document: The document context, with any published side-channel
			values.
		body: Concatenated pass-through bytes.
		errors: Decode error messages reported for the document.
	"""

	document: DocumentContext
	body: bytes = b""
	errors: list[str] = Field(default_factory=list)

	@property
	def frontmatter(self):
		"""Return the published frontmatter value, if any."""
		return self.document.ctx.get("frontmatter")

	@property
	def ok(self) -> bool:
		return not self.errors


def run_document(filt: FrontmatterFilter, document: DocumentContext,
                 chunks: Iterable[bytes]) -> DocumentOutcome:
	"""
	Stream one document through a filter.

	Parameters:
		filt: The filter stage.
		document: Context for the document.
		chunks: The document's bytes, in any chunking.

	Returns:
		DocumentOutcome with the body and any decode errors.
	"""
	parts: list[bytes] = []
	errors: list[str] = []
	for chunk in chunks:
		result = filt.transform(document, Data(payload=chunk))
		if result.error is not None:
			errors.append(str(result.error))
		if result.output:
			parts.append(result.output)

	for _ in range(MAX_DRAIN_ROUNDS):
		result = filt.transform(document, END_OF_DOCUMENT)
		if not result.output:
			break
		parts.append(result.output)
	else:
		logger.warning("%s not drained after %d end-of-document signals",
		               document.name, MAX_DRAIN_ROUNDS)
		filt.discard(document)

	return DocumentOutcome(document=document, body=b"".join(parts),
	                       errors=errors)


def run_documents(
    filt: FrontmatterFilter,
    sources: Iterable[tuple[DocumentContext, Iterable[bytes]]],
) -> list[DocumentOutcome]:
	"""
	Stream several documents through one filter, one after another.

	Parameters:
		filt: The filter stage.
		sources: ``(document, chunks)`` pairs.

	Returns:
		One DocumentOutcome per document, in input order.
	"""
	outcomes = [run_document(filt, doc, chunks) for doc, chunks in sources]
	logger.info("processed %d document(s), %d with errors", len(outcomes),
	            sum(1 for o in outcomes if not o.ok))
	return outcomes


__all__ = [
    "DocumentOutcome",
    "run_document",
    "run_documents",
    "MAX_DRAIN_ROUNDS",
]
