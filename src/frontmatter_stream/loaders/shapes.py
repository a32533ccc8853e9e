"""
Shape factory loading.

Resolves a ``module:attribute`` reference to a shape factory so the CLI can
decode frontmatter into caller-defined types.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

from frontmatter_stream.errors import ConfigError
from frontmatter_stream.utils.logging import get_logger
from frontmatter_stream.utils.protocols import ShapeFactory

logger = get_logger(__name__)


def load_shape_factory(target: str) -> ShapeFactory:
	"""
	Import a shape factory from a ``module:attribute`` reference.

	The attribute may be a ShapeRegistry, a factory function, or any
	other callable taking a discriminator and returning a shape or None.

	Parameters:
		target: Reference such as ``"mysite.shapes:registry"``.

	Returns:
		The resolved callable.

	Raises:
		ConfigError: If the reference is malformed, the module cannot be
			imported, or the attribute is missing or not callable.
	"""
	modname, sep, attr = target.partition(":")
	if not sep or not modname or not attr:
		raise ConfigError(
		    f"shape factory must be given as module:attribute, got {target!r}")
	try:
		module = import_module(modname)
	except ImportError as exc:
		raise ConfigError(f"cannot import {modname!r}: {exc}") from exc

	obj: Any = module
	for part in attr.split("."):
		try:
			obj = getattr(obj, part)
		except AttributeError as exc:
			raise ConfigError(f"{target!r} has no attribute {part!r}") from exc
	if not callable(obj):
		raise ConfigError(f"{target!r} is not callable")
	logger.debug("loaded shape factory %s", target)
	return obj


__all__ = ["load_shape_factory"]
