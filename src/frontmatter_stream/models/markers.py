"""
Marker pair models.

Defines the open/close marker pairs that delimit a frontmatter block and
the immutable table of normalized pairs shared by every parser built from
the same configuration.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from frontmatter_stream.errors import ConfigError

# Triple-dash fenced block and a fenced "yaml"-tagged code block.
DEFAULT_MARKER_PAIRS: tuple[tuple[str, str], ...] = (
    ("---", "---"),
    ("```yaml", "```"),
)


class MarkerPair(BaseModel):
	"""
	A single open/close marker pair.

	Markers must occupy their own line, so the normalized forms carry the
	surrounding newlines: ``open_line`` is ``open + "\\n"`` and
	``close_line`` is ``"\\n" + close + "\\n"``.

	Attributes:
		open: Raw opening marker bytes.
		close: Raw closing marker bytes.
	"""

	model_config = ConfigDict(frozen=True)

	open: bytes = Field(description="Opening marker")
	close: bytes = Field(description="Closing marker")

	@field_validator("open", "close")
	@classmethod
	def validate_non_empty(cls, v: bytes) -> bytes:
		if not v:
			raise ValueError("markers must be non-empty")
		return v

	@property
	def open_line(self) -> bytes:
		"""Return the opening marker as it must appear at document start."""
		return self.open + b"\n"

	@property
	def close_line(self) -> bytes:
		"""Return the closing marker as it must appear after the block."""
		return b"\n" + self.close + b"\n"


class MarkerTable(BaseModel):
	"""
	Ordered, read-only table of marker pairs.

	Declaration order is significant: the first pair whose opening
	matches wins, even when a later pair has a longer opening.
	"""

	model_config = ConfigDict(frozen=True)

	pairs: tuple[MarkerPair, ...]

	@property
	def min_lookahead(self) -> int:
		"""Bytes needed before any opening can be decided."""
		return max(len(p.open_line) for p in self.pairs)

	def __len__(self) -> int:
		return len(self.pairs)


def _coerce_pair(pair: Any) -> MarkerPair:
	if isinstance(pair, MarkerPair):
		return pair
	if isinstance(pair, (str, bytes)) or not isinstance(pair, Sequence):
		raise ConfigError(
		    "frontmatter markers must be given in opening and closing pairs")
	if len(pair) != 2:
		raise ConfigError(
		    "frontmatter markers must be given in opening and closing pairs, "
		    f"got {len(pair)} element(s)")
	try:
		return MarkerPair(open=pair[0], close=pair[1])
	except ValidationError as exc:
		raise ConfigError(f"invalid marker pair {pair!r}: {exc}") from exc


def build_marker_table(
        pairs: Iterable[Any] = DEFAULT_MARKER_PAIRS) -> MarkerTable:
	"""
	Validate and normalize marker pairs into a MarkerTable.

	Parameters:
		pairs: Ordered iterable of ``(open, close)`` pairs. Each marker
			may be ``bytes`` or ``str`` (encoded as UTF-8).

	Returns:
		An immutable MarkerTable.

	Raises:
		ConfigError: If a pair does not have exactly two non-empty
			markers, or if no pairs are given.
	"""
	normalized = tuple(_coerce_pair(p) for p in pairs)
	if not normalized:
		raise ConfigError("at least one marker pair is required")
	return MarkerTable(pairs=normalized)


__all__ = [
    "DEFAULT_MARKER_PAIRS",
    "MarkerPair",
    "MarkerTable",
    "build_marker_table",
]
