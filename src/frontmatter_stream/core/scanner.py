"""
Chunk-boundary-safe frontmatter scanner.

Consumes a document's bytes in arbitrarily sized chunks, recognizes a
leading block delimited by one of the configured marker pairs, and passes
every other byte through unchanged. The captured block is decoded lazily
on request and cached for the lifetime of the document.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Any

from frontmatter_stream.core.decoder import decode_record, decode_typed
from frontmatter_stream.errors import ConfigError, FrontmatterStateError
from frontmatter_stream.models.markers import (
    DEFAULT_MARKER_PAIRS,
    MarkerTable,
    build_marker_table,
)
from frontmatter_stream.models.metadata import MetadataRecord
from frontmatter_stream.utils.codec import YamlCodec
from frontmatter_stream.utils.logging import get_logger
from frontmatter_stream.utils.protocols import ShapeFactory, StructuredCodec

logger = get_logger(__name__)


class Stage(str, Enum):
	"""Scanner stage for the current document."""

	SEEKING_OPEN = "seeking_open"
	SEEKING_CLOSE = "seeking_close"
	PASSTHROUGH = "passthrough"


class ParserState:
	"""
	Per-document scanner state.

	A ParserState is strictly sequential: feed one chunk at a time and
	let each call return before supplying the next. Build one per
	document; only the MarkerTable may be shared between instances.

	Attributes:
		table: Shared, read-only marker table.
		factory: Optional discriminator-to-shape factory.
		codec: Structured-text codec used by the decoder.
		max_buffer_size: Cap on bytes buffered while seeking a closing
			marker; 0 means unbounded.
		stage: Current stage.
		parsed: True once a complete block has been captured.
	"""

	def __init__(self, table: MarkerTable,
	             factory: ShapeFactory | None = None,
	             codec: StructuredCodec | None = None,
	             max_buffer_size: int = 0):
		if max_buffer_size < 0:
			raise ConfigError("max_buffer_size must be >= 0")
		self.table = table
		self.factory = factory
		self.codec: StructuredCodec = codec or YamlCodec()
		self.max_buffer_size = max_buffer_size
		self._min_lookahead = table.min_lookahead

		if max_buffer_size:
			short = [
			    p for p in table.pairs if len(p.close_line) > max_buffer_size
			]
			if short:
				# Such a pair only closes when its marker lands in one window.
				logger.warning(
				    "max_buffer_size=%d is smaller than closing marker(s) %s",
				    max_buffer_size, [p.close for p in short])

		self._buffer = bytearray()
		self._pair_index = 0
		self._consumed_open = b""
		self._search_from = 0
		self._metadata = b""
		self._record: MetadataRecord | None = None
		self._typed: Any = None
		self._typed_done = False
		self._abandoned = False
		self.stage = Stage.SEEKING_OPEN
		self.parsed = False

	@classmethod
	def from_pairs(cls, pairs: Iterable[Any] = DEFAULT_MARKER_PAIRS,
	               factory: ShapeFactory | None = None,
	               codec: StructuredCodec | None = None,
	               max_buffer_size: int = 0) -> "ParserState":
		"""
		Build a ParserState straight from marker pairs.

		Parameters:
			pairs: Ordered ``(open, close)`` pairs.
			factory: Optional shape factory.
			codec: Optional codec, defaults to YamlCodec.
			max_buffer_size: Closing-marker buffer cap (0 = unbounded).

		Returns:
			A ParserState in the SEEKING_OPEN stage.

		Raises:
			ConfigError: If the pairs or the buffer cap are malformed.
		"""
		return cls(build_marker_table(pairs), factory=factory, codec=codec,
		           max_buffer_size=max_buffer_size)

	@property
	def buffered(self) -> int:
		"""Return the number of bytes currently held back."""
		return len(self._buffer)

	@property
	def raw_metadata(self) -> bytes:
		"""Return the captured block bytes (empty until parsed)."""
		return self._metadata

	@property
	def pair_index(self) -> int | None:
		"""Return the committed pair index while seeking a closing marker."""
		if self.stage is Stage.SEEKING_CLOSE:
			return self._pair_index
		return None

	@property
	def abandoned(self) -> bool:
		"""Return True if an opened block was flushed as literal content."""
		return (self.stage is Stage.PASSTHROUGH and not self.parsed and
		        self._abandoned)

	def parse(self, chunk: bytes | bytearray | memoryview | None) -> bytes | None:
		"""
		Feed one chunk and return any bytes ready for the next stage.

		Parameters:
			chunk: Next slice of the document. ``None`` probes the state
				without advancing it.

		Returns:
			Pass-through bytes, or None while the scanner is buffering.
		"""
		if chunk is None:
			return None
		if self.stage is Stage.SEEKING_OPEN:
			return self.feed_opening(chunk)
		if self.stage is Stage.SEEKING_CLOSE:
			return self.feed_closing(chunk)
		return chunk if isinstance(chunk, bytes) else bytes(chunk)

	def feed_opening(self, chunk: bytes | bytearray | memoryview) -> bytes | None:
		"""
		Buffer until an opening marker can be decided, then commit or give up.

		Parameters:
			chunk: Next slice of the document.

		Returns:
			None while buffering or inside a block; otherwise the bytes
			to pass through.
		"""
		self._buffer += chunk
		if len(self._buffer) < self._min_lookahead:
			return None

		window = bytes(self._buffer)
		self._buffer.clear()
		for index, pair in enumerate(self.table.pairs):
			if window.startswith(pair.open_line):
				logger.debug("opening marker %r matched", pair.open)
				self._pair_index = index
				self._consumed_open = pair.open_line
				self._search_from = 0
				self.stage = Stage.SEEKING_CLOSE
				return self.feed_closing(window[len(pair.open_line):])

		self.stage = Stage.PASSTHROUGH
		return window

	def feed_closing(self, chunk: bytes | bytearray | memoryview) -> bytes | None:
		"""
		Buffer block content until the committed pair's closing marker.

		Only the committed pair's closing marker ends the block; the first
		occurrence wins.

		Parameters:
			chunk: Next slice of the document.

		Returns:
			None while the block is still open; otherwise the bytes that
			followed the closing marker, or the flushed buffer when the
			buffer cap was exceeded.
		"""
		self._buffer += chunk
		close = self.table.pairs[self._pair_index].close_line
		i = self._buffer.find(close, self._search_from)
		if i >= 0:
			self._metadata = bytes(self._buffer[:i])
			rest = bytes(self._buffer[i + len(close):])
			self._buffer.clear()
			self._consumed_open = b""
			self._search_from = 0
			self.parsed = True
			self.stage = Stage.PASSTHROUGH
			logger.debug("frontmatter block captured (%d bytes)",
			             len(self._metadata))
			return rest

		if self.max_buffer_size == 0 or len(
		    self._buffer) < self.max_buffer_size:
			# A closing marker may still straddle the next chunk boundary.
			self._search_from = max(0, len(self._buffer) - len(close) + 1)
			return None

		logger.warning(
		    "no closing marker within %d bytes, passing block through",
		    self.max_buffer_size)
		flushed = self._consumed_open + bytes(self._buffer)
		self._buffer.clear()
		self._consumed_open = b""
		self._search_from = 0
		self._abandoned = True
		self.stage = Stage.PASSTHROUGH
		return flushed

	def metadata_record(self) -> MetadataRecord:
		"""
		Return the decoded metadata record, decoding it on first use.

		Returns:
			The cached MetadataRecord.

		Raises:
			FrontmatterStateError: If no block has been captured.
			DecodeError: If the block is malformed. Nothing is cached, so
				a later call decodes again.
		"""
		if self._record is not None:
			return self._record
		self._require_parsed()
		self._record = decode_record(self._metadata, self.codec)
		return self._record

	def typed_value(self) -> Any | None:
		"""
		Return the block decoded into the caller's shape.

		Returns:
			The validated instance, or None when the factory declines
			(cached as well, the factory is not asked again).

		Raises:
			FrontmatterStateError: If no block has been captured.
			DecodeError: If decoding or validation fails.
		"""
		if self._typed_done:
			logger.debug("typed frontmatter cache hit")
			return self._typed
		record = self.metadata_record()
		self._typed = decode_typed(record, self.factory, self.codec)
		self._typed_done = True
		return self._typed

	def reset(self) -> bytes:
		"""
		Drain buffered bytes and prepare for the next document.

		Callers should repeat until an empty result is returned.

		Returns:
			Bytes that were held back and never emitted; ``b""`` when
			nothing was pending.
		"""
		if self.stage is Stage.SEEKING_CLOSE:
			flushed = self._consumed_open + bytes(self._buffer)
		else:
			flushed = bytes(self._buffer)

		self._buffer.clear()
		self._pair_index = 0
		self._consumed_open = b""
		self._search_from = 0
		self._metadata = b""
		self._record = None
		self._typed = None
		self._typed_done = False
		self._abandoned = False
		self.parsed = False
		self.stage = Stage.SEEKING_OPEN
		if flushed:
			logger.debug("reset flushed %d pending bytes", len(flushed))
		return flushed

	def _require_parsed(self) -> None:
		if not self.parsed:
			raise FrontmatterStateError(
			    "no frontmatter block has been captured")


__all__ = ["Stage", "ParserState"]
