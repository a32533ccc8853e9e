"""
Frontmatter Stream - streaming frontmatter extraction for document pipelines.

This package extracts a leading metadata block from documents whose bytes
arrive in arbitrarily sized chunks, and decodes it into caller-chosen
shapes selected by an ``fmtype`` discriminator.

Main entry points:
    - frontmatter_stream.main: CLI entrypoint
    - frontmatter_stream.core.scanner: ParserState for direct streaming
    - frontmatter_stream.core.filter: frontmatter_filter() pipeline stage
    - frontmatter_stream.models.config: Config and load_env()
"""
