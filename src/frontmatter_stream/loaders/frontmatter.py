"""
Whole-text frontmatter splitting.

Provides a convenience for callers that already hold a document in
memory; it runs the streaming scanner over the text in one chunk.
"""

from __future__ import annotations

from typing import Any

from frontmatter_stream.core.scanner import ParserState
from frontmatter_stream.errors import DecodeError
from frontmatter_stream.utils.logging import get_logger

logger = get_logger(__name__)


def split_frontmatter(text: str) -> tuple[dict[Any, Any], str]:
	"""
	Split frontmatter from a markdown body.

	Recognizes a leading ``---`` or ```` ```yaml ```` block whose markers
	sit on their own lines.

	Parameters:
		text: The full markdown file content.

	Returns:
		Tuple of (frontmatter dict, body text). Returns an empty dict and
		the original text if no block is found or it is unterminated, and
		an empty dict with the body if the block is not valid YAML.
	"""
	state = ParserState.from_pairs()
	# A closing marker on the last line still needs its newline.
	padded = not text.endswith("\n")
	out = state.parse((text + "\n" if padded else text).encode("utf-8"))
	if not state.parsed:
		return {}, text

	try:
		meta = dict(state.metadata_record().data)
	except DecodeError as exc:
		logger.debug("ignoring malformed frontmatter: %s", exc)
		meta = {}

	body = (out or b"").decode("utf-8")
	if padded and body.endswith("\n"):
		body = body[:-1]
	return meta, body


__all__ = ["split_frontmatter"]
