"""
Frontmatter stream models.

This subpackage contains Pydantic models for configuration, marker
tables, decoded metadata, and the document stream protocol.

Key models:
    - Config: Application configuration loaded from environment
    - ExtractParams: Validated CLI parameters
    - MarkerPair / MarkerTable: Normalized open/close markers
    - MetadataRecord: Decoded frontmatter envelope
    - DocumentContext / Data / FilterResult: Pipeline stream protocol
"""

from .config import Config, load_env
from .extract_params import ExtractParams
from .markers import (
    DEFAULT_MARKER_PAIRS,
    MarkerPair,
    MarkerTable,
    build_marker_table,
)
from .metadata import MetadataRecord, DISCRIMINATOR_KEY
from .document import (
    DocumentContext,
    Data,
    EndOfDocument,
    END_OF_DOCUMENT,
    StreamItem,
    FilterResult,
)

__all__ = [
    "Config",
    "load_env",
    "ExtractParams",
    "DEFAULT_MARKER_PAIRS",
    "MarkerPair",
    "MarkerTable",
    "build_marker_table",
    "MetadataRecord",
    "DISCRIMINATOR_KEY",
    "DocumentContext",
    "Data",
    "EndOfDocument",
    "END_OF_DOCUMENT",
    "StreamItem",
    "FilterResult",
]
