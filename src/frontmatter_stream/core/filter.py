"""
Pipeline filter stage.

Wraps the scanner in the per-chunk transform a host pipeline calls for
every document: one ParserState per in-flight document, extension
filtering, and publication of decoded frontmatter into the document's
side-channel.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from frontmatter_stream.core.scanner import ParserState
from frontmatter_stream.errors import ConfigError, DecodeError
from frontmatter_stream.models.config import Config
from frontmatter_stream.models.document import (
    Data,
    DocumentContext,
    EndOfDocument,
    FilterResult,
    StreamItem,
)
from frontmatter_stream.models.markers import (
    DEFAULT_MARKER_PAIRS,
    MarkerTable,
    build_marker_table,
)
from frontmatter_stream.utils.logging import get_logger
from frontmatter_stream.utils.protocols import ShapeFactory, StructuredCodec

logger = get_logger(__name__)

FRONTMATTER_KEY = "frontmatter"
TEMPLATE_KEY = "template"


class FrontmatterFilter:
	"""
	Per-chunk frontmatter transform for a document pipeline.

	Documents are identified by object identity, so two live contexts
	sharing a name never share a ParserState. Each gets its own state,
	created on its first chunk and dropped at end of document. The marker table is shared by all of them. An instance is
	not thread-safe; use one per scheduling loop.
	"""

	def __init__(self, factory: ShapeFactory | None = None, *,
	             pairs: Iterable[Any] = DEFAULT_MARKER_PAIRS,
	             table: MarkerTable | None = None,
	             include_template: bool = True,
	             extensions: Iterable[str] = (".md",),
	             max_buffer_size: int = 0,
	             codec: StructuredCodec | None = None):
		if max_buffer_size < 0:
			raise ConfigError("max_buffer_size must be >= 0")
		self.table = table or build_marker_table(pairs)
		self.factory = factory
		self.codec = codec
		self.include_template = include_template
		self.extensions = frozenset(e.lower() for e in extensions)
		self.max_buffer_size = max_buffer_size
		# id(document) -> (document, state); the held reference pins the id
		self._states: dict[int, tuple[DocumentContext, ParserState]] = {}

	@classmethod
	def from_config(cls, config: Config,
	                factory: ShapeFactory | None = None,
	                **kwargs: Any) -> "FrontmatterFilter":
		"""
		Build a filter from application configuration.

		Parameters:
			config: Loaded Config.
			factory: Optional shape factory.
			**kwargs: Extra constructor arguments (``pairs``, ``codec``).

		Returns:
			A configured FrontmatterFilter.
		"""
		return cls(factory, include_template=config.include_template,
		           extensions=config.extensions,
		           max_buffer_size=config.max_buffer_size, **kwargs)

	def accepts(self, document: DocumentContext) -> bool:
		"""Return True if the document's extension is filtered."""
		return document.extension in self.extensions

	def state_for(self, document: DocumentContext) -> ParserState:
		"""Return the document's ParserState, creating it on first use."""
		entry = self._states.get(id(document))
		if entry is None:
			state = ParserState(self.table, factory=self.factory,
			                    codec=self.codec,
			                    max_buffer_size=self.max_buffer_size)
			self._states[id(document)] = (document, state)
			return state
		return entry[1]

	def discard(self, document: DocumentContext) -> None:
		"""Drop a document's state without flushing it."""
		self._states.pop(id(document), None)

	@property
	def active_documents(self) -> list[str]:
		"""Return names of documents with a live ParserState."""
		return [doc.name for doc, _ in self._states.values()]

	def transform(self, document: DocumentContext | None,
	              item: StreamItem) -> FilterResult:
		"""
		Feed one stream item for a document.

		Parameters:
			document: The document the item belongs to; None is passed
				through as an empty result.
			item: ``Data(payload)`` or ``END_OF_DOCUMENT``.

		Returns:
			FilterResult with the bytes for the next stage (None while
			buffering) and any decode error.
		"""
		if document is None:
			return FilterResult()

		if not self.accepts(document):
			output = item.payload if isinstance(item, Data) else None
			return FilterResult(document=document, output=output)

		if isinstance(item, EndOfDocument):
			return self._finish(document)

		state = self.state_for(document)
		was_parsed = state.parsed
		output = state.parse(item.payload)
		if output is None:
			return FilterResult(document=document)

		error: DecodeError | None = None
		if state.parsed and not was_parsed:
			try:
				self._publish(document, state)
			except DecodeError as exc:
				logger.warning("frontmatter decode failed for %s: %s",
				               document.name, exc)
				error = exc
		return FilterResult(document=document, output=output, error=error)

	__call__ = transform

	def _publish(self, document: DocumentContext, state: ParserState) -> None:
		record = state.metadata_record()
		if (self.include_template and record.template is not None and
		    TEMPLATE_KEY not in document.ctx):
			document.ctx[TEMPLATE_KEY] = record.template
		if FRONTMATTER_KEY not in document.ctx:
			value = state.typed_value()
			document.ctx[FRONTMATTER_KEY] = (value
			                                 if value is not None else record)
		logger.debug("published frontmatter for %s (fmtype=%r)",
		             document.name, record.discriminator)

	def _finish(self, document: DocumentContext) -> FilterResult:
		entry = self._states.pop(id(document), None)
		if entry is None:
			return FilterResult(document=document, output=b"")
		return FilterResult(document=document, output=entry[1].reset())


def frontmatter_filter(factory: ShapeFactory | None = None,
                       include_template: bool = True) -> FrontmatterFilter:
	"""
	Build the default filter: ``---`` and ```` ```yaml ```` blocks in
	``.md`` documents, no buffer cap.

	Parameters:
		factory: Optional discriminator-to-shape factory.
		include_template: Copy a ``template`` field into the document
			side-channel.

	Returns:
		A FrontmatterFilter.
	"""
	return FrontmatterFilter(factory, include_template=include_template)


__all__ = [
    "FrontmatterFilter",
    "frontmatter_filter",
    "FRONTMATTER_KEY",
    "TEMPLATE_KEY",
]
