"""
Metadata decoder.

Turns the bytes captured by the scanner into a MetadataRecord and, via
the caller's shape factory, into a typed value.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from frontmatter_stream.errors import DecodeError
from frontmatter_stream.models.metadata import DISCRIMINATOR_KEY, MetadataRecord
from frontmatter_stream.utils.logging import get_logger
from frontmatter_stream.utils.protocols import ShapeFactory, StructuredCodec

logger = get_logger(__name__)


def decode_record(raw: bytes, codec: StructuredCodec) -> MetadataRecord:
	"""
	Decode captured bytes into a MetadataRecord.

	Parameters:
		raw: Bytes between the opening and closing markers.
		codec: Structured-text codec.

	Returns:
		A MetadataRecord whose ``raw`` is byte-identical to the input.

	Raises:
		DecodeError: If the bytes are malformed, or ``fmtype`` or
			``template`` have the wrong type.
	"""
	data = codec.decode(raw)
	envelope: dict[str, Any] = {"raw": raw, "data": data}
	for key in (DISCRIMINATOR_KEY, "template"):
		# YAML null behaves like an absent key
		if data.get(key) is not None:
			envelope[key] = data[key]
	try:
		return MetadataRecord.model_validate(envelope)
	except ValidationError as exc:
		raise DecodeError(f"invalid frontmatter envelope: {exc}") from exc


def decode_typed(record: MetadataRecord, factory: ShapeFactory | None,
                 codec: StructuredCodec) -> Any | None:
	"""
	Decode a record into the shape the factory selects.

	Parameters:
		record: The decoded envelope.
		factory: Discriminator-to-shape factory; None declines every
			discriminator.
		codec: Structured-text codec.

	Returns:
		The validated instance, or None when the factory declines.

	Raises:
		DecodeError: If the factory fails or the data does not fit the
			selected shape.
	"""
	if factory is None:
		return None
	try:
		shape = factory(record.discriminator)
	except DecodeError:
		raise
	except Exception as exc:
		raise DecodeError("shape factory failed for discriminator "
		                  f"{record.discriminator!r}: {exc}") from exc
	if shape is None:
		logger.debug("no shape for discriminator %r, leaving untyped",
		             record.discriminator)
		return None
	return codec.decode_into(record.raw, shape)


__all__ = ["decode_record", "decode_typed"]
