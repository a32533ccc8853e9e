"""
Metadata record model.

Defines the MetadataRecord produced once per document by decoding the
bytes captured between a frontmatter block's markers.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# YAML key holding the discriminator that selects a target shape.
DISCRIMINATOR_KEY = "fmtype"


class MetadataRecord(BaseModel):
	"""
	Decoded frontmatter envelope.

	Attributes:
		discriminator: Value of the ``fmtype`` key, empty when absent.
		raw: Exact bytes between the normalized open and close markers.
		template: Optional ``template`` key, propagated to the document
			side-channel by the filter.
		data: The full decoded mapping.
	"""

	model_config = ConfigDict(frozen=True, populate_by_name=True,
	                          coerce_numbers_to_str=True)

	discriminator: str = Field(default="", alias=DISCRIMINATOR_KEY,
	                           description="Shape discriminator")
	raw: bytes = Field(default=b"", description="Raw metadata bytes")
	template: str | None = Field(default=None,
	                             description="Template name, if any")
	data: dict[Any, Any] = Field(default_factory=dict,
	                             description="Decoded key/value data")


__all__ = ["MetadataRecord", "DISCRIMINATOR_KEY"]
