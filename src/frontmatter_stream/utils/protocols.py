"""
Protocol definitions for dependency injection.

Defines the collaborator interfaces the parser consumes: the shape
factory that maps a discriminator to a target type, and the
structured-text codec that decodes captured metadata bytes.
"""

from __future__ import annotations

from typing import Any, Protocol


class ShapeFactory(Protocol):
	"""
	Protocol for discriminator-to-shape selection.

	Returns the target type for a discriminator, or None to leave the
	block untyped.
	"""

	def __call__(self, discriminator: str) -> Any | None:
		...


class StructuredCodec(Protocol):
	"""
	Protocol for the structured-text codec.

	Defines the two decode operations the metadata decoder needs.
	"""

	def decode(self, raw: bytes) -> dict[str, Any]:
		"""Decode raw bytes into a mapping."""
		...

	def decode_into(self, raw: bytes, shape: Any) -> Any:
		"""Decode raw bytes into an instance of ``shape``."""
		...


__all__ = ["ShapeFactory", "StructuredCodec"]
