"""
YAML codec.

Decodes captured frontmatter bytes with PyYAML and validates them into
caller shapes with pydantic.
"""

from __future__ import annotations

from typing import Any

import yaml
from pydantic import PydanticUserError, TypeAdapter, ValidationError

from frontmatter_stream.errors import DecodeError


class YamlCodec:
	"""Structured-text codec backed by ``yaml.safe_load``."""

	def decode(self, raw: bytes) -> dict[str, Any]:
		"""
		Decode raw bytes into a mapping.

		An empty block decodes to an empty mapping.

		Parameters:
			raw: YAML document bytes.

		Returns:
			The decoded mapping.

		Raises:
			DecodeError: If the bytes are not valid YAML or do not
				hold a mapping.
		"""
		try:
			data = yaml.safe_load(raw)
		except yaml.YAMLError as exc:
			raise DecodeError(f"malformed frontmatter: {exc}") from exc
		if data is None:
			return {}
		if not isinstance(data, dict):
			raise DecodeError("frontmatter must be a mapping, got "
			                  f"{type(data).__name__}")
		return data

	def decode_into(self, raw: bytes, shape: Any) -> Any:
		"""
		Decode raw bytes and validate them into ``shape``.

		Parameters:
			raw: YAML document bytes.
			shape: Any type pydantic can validate: a BaseModel subclass,
				dataclass, TypedDict, or plain container type.

		Returns:
			The validated instance.

		Raises:
			DecodeError: If decoding or validation fails, or if pydantic
				cannot build a validator for ``shape``.
		"""
		data = self.decode(raw)
		name = getattr(shape, "__name__", repr(shape))
		try:
			adapter = TypeAdapter(shape)
		except PydanticUserError as exc:
			raise DecodeError(
			    f"unsupported frontmatter shape {name}: {exc}") from exc
		try:
			return adapter.validate_python(data)
		except ValidationError as exc:
			raise DecodeError(
			    f"frontmatter does not fit {name}: {exc}") from exc


__all__ = ["YamlCodec"]
