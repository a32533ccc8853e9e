"""Shared utility functions.

This subpackage provides common utilities used across the application
with no dependencies on other subpackages.

Key modules:
    - codec: YAML decoding and shape validation
    - logging: Logging configuration
    - protocols: Protocol definitions for dependency injection
"""

from .codec import YamlCodec
from .logging import configure_logging, get_logger
from .protocols import ShapeFactory, StructuredCodec

__all__ = [
    # codec
    "YamlCodec",
    # logging
    "configure_logging",
    "get_logger",
    # protocols
    "ShapeFactory",
    "StructuredCodec",
]
