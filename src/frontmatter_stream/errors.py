"""
Exception hierarchy.

Defines the errors raised while configuring marker tables, scanning
documents, and decoding captured frontmatter blocks.
"""

from __future__ import annotations


class FrontmatterError(Exception):
	"""Base class for all frontmatter-stream errors."""


class ConfigError(FrontmatterError, ValueError):
	"""Malformed marker pair configuration or parser settings.

	Raised at construction time, before any document is processed.
	"""


class DecodeError(FrontmatterError, ValueError):
	"""A captured metadata block could not be decoded.

	Covers malformed YAML, a block that is not a mapping, and failures
	validating the block into the caller's target shape.
	"""


class FrontmatterStateError(FrontmatterError, RuntimeError):
	"""The decoder was used before a metadata block was captured."""


__all__ = [
    "FrontmatterError",
    "ConfigError",
    "DecodeError",
    "FrontmatterStateError",
]
