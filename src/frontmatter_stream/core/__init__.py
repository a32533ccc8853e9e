"""Core frontmatter scanning and decoding.

This subpackage contains the streaming scanner, the lazy metadata
decoder, and the pipeline filter built on top of them.

Key modules:
    - scanner: ParserState state machine and Stage
    - decoder: MetadataRecord and typed value decoding
    - shapes: ShapeRegistry discriminator mapping
    - filter: FrontmatterFilter pipeline stage
    - pipeline: Host-side document driver
"""

from frontmatter_stream.core.scanner import ParserState, Stage
from frontmatter_stream.core.decoder import decode_record, decode_typed
from frontmatter_stream.core.shapes import ShapeRegistry
from frontmatter_stream.core.filter import (
    FRONTMATTER_KEY,
    TEMPLATE_KEY,
    FrontmatterFilter,
    frontmatter_filter,
)
from frontmatter_stream.core.pipeline import (
    DocumentOutcome,
    run_document,
    run_documents,
)

__all__ = [
    # scanner
    "ParserState",
    "Stage",
    # decoder
    "decode_record",
    "decode_typed",
    # shapes
    "ShapeRegistry",
    # filter
    "FRONTMATTER_KEY",
    "TEMPLATE_KEY",
    "FrontmatterFilter",
    "frontmatter_filter",
    # pipeline
    "DocumentOutcome",
    "run_document",
    "run_documents",
]
