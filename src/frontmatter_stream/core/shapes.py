"""
Discriminator-to-shape registry.

Provides a mapping-backed shape factory so callers can select target
types by the ``fmtype`` discriminator without writing a factory function.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from frontmatter_stream.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class ShapeRegistry:
	"""
	Mapping of discriminators to target shapes.

	Instances are callable and satisfy the ShapeFactory protocol. Unknown
	discriminators return the default shape, which is None unless set.

	Example:
		registry = ShapeRegistry({"post": Post})

		@registry.register("page")
		class Page(BaseModel):
			title: str
	"""

	def __init__(self, shapes: Mapping[str, Any] | None = None,
	             default: Any | None = None):
		self._shapes: dict[str, Any] = dict(shapes or {})
		self.default = default

	def register(self, discriminator: str,
	             shape: Any | None = None) -> Any:
		"""
		Register a shape for a discriminator.

		Usable directly (``register("post", Post)``) or as a class
		decorator (``@register("post")``).

		Parameters:
			discriminator: The ``fmtype`` value.
			shape: Target type; omitted when used as a decorator.

		Returns:
			The shape, or a decorator returning it.
		"""
		if shape is not None:
			self._shapes[discriminator] = shape
			return shape

		def decorator(cls: T) -> T:
			self._shapes[discriminator] = cls
			return cls

		return decorator

	def __call__(self, discriminator: str) -> Any | None:
		shape = self._shapes.get(discriminator, self.default)
		if shape is None:
			logger.debug("discriminator %r is not registered", discriminator)
		return shape

	def __contains__(self, discriminator: object) -> bool:
		return discriminator in self._shapes

	def __len__(self) -> int:
		return len(self._shapes)

	@property
	def discriminators(self) -> list[str]:
		"""Return the registered discriminators, sorted."""
		return sorted(self._shapes)



__all__ = ["ShapeRegistry"]
