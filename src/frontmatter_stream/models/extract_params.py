"""
Extract parameters model.

Defines validated CLI parameters for streaming documents through the
frontmatter filter.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field, field_validator
from pydantic_core.core_schema import ValidationInfo


class ExtractParams(BaseModel):
	"""Validated parameters for the extract/inspect commands."""

	paths: list[Path] = Field(description="Documents to process")
	chunk_size: Optional[int] = Field(default=None,
	                                  description="Override read size")
	max_buffer_size: Optional[int] = Field(
	    default=None, description="Override closing-marker buffer cap")
	include_template: Optional[bool] = Field(
	    default=None, description="Propagate template field")

	@field_validator('paths')
	@classmethod
	def validate_paths(cls, v: list[Path]) -> list[Path]:
		if not v:
			raise ValueError("at least one path is required")
		missing = [str(p) for p in v if not p.is_file()]
		if missing:
			raise ValueError(f"not a file: {', '.join(missing)}")
		return v

	@field_validator('chunk_size')
	@classmethod
	def validate_positive(cls, v: Optional[int],
	                      info: ValidationInfo) -> Optional[int]:
		if v is None:
			return v
		if v <= 0:
			raise ValueError(f"{info.field_name} must be > 0")
		return v

	@field_validator('max_buffer_size')
	@classmethod
	def validate_non_negative(cls, v: Optional[int],
	                          info: ValidationInfo) -> Optional[int]:
		if v is None:
			return v
		if v < 0:
			raise ValueError(f"{info.field_name} must be >= 0")
		return v


__all__ = ["ExtractParams"]
