from __future__ import annotations

from pathlib import Path
from typing import Any, TYPE_CHECKING

from pydantic import Field, field_validator
from pydantic_core.core_schema import ValidationInfo
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

if TYPE_CHECKING:
	from .extract_params import ExtractParams


def load_env(env_file: str | Path | None = None) -> None:
	"""Load environment variables from an `.env` file if present."""
	env_path = Path(env_file) if env_file else Path(".env")
	if env_path.exists():
		load_dotenv(env_path)


class Config(BaseSettings):
	"""Runtime configuration loaded from environment variables."""

	model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

	include_template: bool = Field(
	    True,
	    alias="FRONTMATTER_INCLUDE_TEMPLATE",
	    description=
	    "Copy a frontmatter `template` field into the document context",
	)
	max_buffer_size: int = Field(
	    0,
	    alias="FRONTMATTER_MAX_BUFFER_SIZE",
	    description=
	    "Bytes buffered while seeking a closing marker (0 = unbounded)",
	)
	extensions: Any = Field(
	    default_factory=lambda: [".md"],
	    alias="FRONTMATTER_EXTENSIONS",
	    description="File extensions the filter parses",
	)
	chunk_size: int = Field(
	    4096,
	    alias="FRONTMATTER_CHUNK_SIZE",
	    description="Read size used when streaming files",
	)
	log_level: str = Field("info", alias="LOG_LEVEL",
	                       description="Log level")

	@field_validator("extensions", mode="before")
	@classmethod
	def split_extensions(cls, v: Any) -> list[str]:
		"""Normalize extensions to a list regardless of input format."""
		if v is None or v == "":
			return []
		if isinstance(v, (list, tuple)):
			items = [str(p) for p in v]
		else:
			# fallback: comma-separated string
			items = str(v).split(",")
		return [p.strip() for p in items if p.strip()]

	@field_validator("extensions", mode="after")
	@classmethod
	def dot_extensions(cls, v: list[str]) -> list[str]:
		"""Lowercase and prefix each extension with a dot."""
		return [e.lower() if e.startswith(".") else f".{e.lower()}" for e in v]

	@field_validator("chunk_size")
	@classmethod
	def validate_positive(cls, v: Any, info: "ValidationInfo") -> Any:
		if int(v) <= 0:
			raise ValueError(f"{info.field_name} must be > 0")
		return v

	@field_validator("max_buffer_size")
	@classmethod
	def validate_non_negative(cls, v: Any, info: "ValidationInfo") -> Any:
		if int(v) < 0:
			raise ValueError(f"{info.field_name} must be >= 0")
		return v

	def apply_overrides(self, params: "ExtractParams") -> None:
		"""Apply CLI overrides from ExtractParams onto this config.

		Only non-None fields in params are applied, preserving
		environment-based defaults for anything the user didn't explicitly set.

		Parameters:
			params: Validated extract parameters with optional overrides.
		"""
		_OVERRIDES: list[tuple[str, str]] = [
		    ("chunk_size", "chunk_size"),
		    ("max_buffer_size", "max_buffer_size"),
		    ("include_template", "include_template"),
		]
		for param_field, config_field in _OVERRIDES:
			value = getattr(params, param_field)
			if value is not None:
				setattr(self, config_field, value)


__all__ = ["Config", "load_env"]
