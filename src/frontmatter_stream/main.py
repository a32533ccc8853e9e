from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import typer
from pydantic import TypeAdapter
from typer.main import get_command

from frontmatter_stream.core.filter import FrontmatterFilter
from frontmatter_stream.core.pipeline import DocumentOutcome, run_document
from frontmatter_stream.errors import ConfigError
from frontmatter_stream.loaders.documents import iter_chunks, load_document
from frontmatter_stream.loaders.shapes import load_shape_factory
from frontmatter_stream.models.config import Config, load_env
from frontmatter_stream.models.extract_params import ExtractParams
from frontmatter_stream.models.metadata import MetadataRecord
from frontmatter_stream.ui.summary import print_summary
from frontmatter_stream.utils.logging import configure_logging
from frontmatter_stream.utils.protocols import ShapeFactory

cli = typer.Typer(add_completion=False, no_args_is_help=True)


@cli.callback()
def root() -> None:
	"""
	Root callback for the frontmatter-stream CLI.

	Sets up the Typer application with no-args-is-help behavior.
	"""
	return None


def process_paths(
    paths: list[Path],
    chunk_size: int | None = None,
    max_buffer_size: int | None = None,
    include_template: bool | None = None,
    factory: ShapeFactory | None = None,
) -> list[DocumentOutcome]:
	"""
	Stream each file through a freshly configured filter.

	Parameters:
		paths: Files to process.
		chunk_size: Override for the read size.
		max_buffer_size: Override for the closing-marker buffer cap.
		include_template: Override for template propagation.
		factory: Optional shape factory for typed frontmatter.

	Returns:
		One DocumentOutcome per file, in order.
	"""
	load_env()
	config = Config()
	configure_logging(config.log_level)
	params = ExtractParams(
	    paths=paths,
	    chunk_size=chunk_size,
	    max_buffer_size=max_buffer_size,
	    include_template=include_template,
	)
	config.apply_overrides(params)
	filt = FrontmatterFilter.from_config(config, factory)
	return [
	    run_document(filt, load_document(p), iter_chunks(p, config.chunk_size))
	    for p in params.paths
	]


def resolve_factory(shapes: str | None) -> ShapeFactory | None:
	"""Load the ``--shapes`` factory, reporting bad references as CLI errors."""
	if not shapes:
		return None
	try:
		return load_shape_factory(shapes)
	except ConfigError as exc:
		raise typer.BadParameter(str(exc), param_hint="--shapes") from exc


def outcome_to_dict(outcome: DocumentOutcome) -> dict[str, Any]:
	"""Return a JSON-friendly view of a DocumentOutcome."""
	value = outcome.frontmatter
	if value is None:
		fmtype, shape, fields = "", None, None
	elif isinstance(value, MetadataRecord):
		fmtype, shape, fields = value.discriminator, None, value.data
	else:
		fmtype = str(getattr(value, "fmtype", "") or "")
		shape = type(value).__name__
		fields = TypeAdapter(type(value)).dump_python(value, mode="json")
	return {
	    "name": outcome.document.name,
	    "fmtype": fmtype,
	    "shape": shape,
	    "template": outcome.document.ctx.get("template"),
	    "frontmatter": fields,
	    "body_bytes": len(outcome.body),
	    "errors": outcome.errors,
	}


def extract_impl(
    paths: list[Path],
    chunk_size: int | None = None,
    max_buffer_size: int | None = None,
    include_template: bool | None = None,
    shapes: str | None = None,
) -> None:
	"""
	Print one JSON object per file describing its frontmatter.

	Parameters:
		paths: Files to process.
		chunk_size: Override for the read size.
		max_buffer_size: Override for the closing-marker buffer cap.
		include_template: Override for template propagation.
		shapes: Optional ``module:attribute`` shape factory reference.
	"""
	factory = resolve_factory(shapes)
	for outcome in process_paths(paths, chunk_size, max_buffer_size,
	                             include_template, factory):
		typer.echo(json.dumps(outcome_to_dict(outcome), default=str))


@cli.command()
def extract(
    paths: list[Path],
    chunk_size: int = typer.Option(None, "--chunk-size",
                                   help="Override read size in bytes"),
    max_buffer_size: int = typer.Option(
        None, "--max-buffer-size",
        help="Override closing-marker buffer cap (0 = unbounded)"),
    include_template: bool = typer.Option(
        None,
        "--include-template/--no-include-template",
        help="Propagate a frontmatter template field",
    ),
    shapes: str = typer.Option(
        None, "--shapes",
        help="Shape factory as module:attribute, e.g. mysite.shapes:registry"),
) -> None:
	"""
	Extract frontmatter from files as JSON lines.
	"""
	extract_impl(paths, chunk_size, max_buffer_size, include_template, shapes)


@cli.command()
def body(
    path: Path,
    chunk_size: int = typer.Option(None, "--chunk-size",
                                   help="Override read size in bytes"),
) -> None:
	"""
	Write a file's content without its frontmatter block to stdout.
	"""
	outcome = process_paths([path], chunk_size)[0]
	for err in outcome.errors:
		typer.echo(f"warning: {err}", err=True)
	typer.echo(outcome.body, nl=False)


@cli.command()
def inspect(
    paths: list[Path],
    chunk_size: int = typer.Option(None, "--chunk-size",
                                   help="Override read size in bytes"),
    max_buffer_size: int = typer.Option(
        None, "--max-buffer-size",
        help="Override closing-marker buffer cap (0 = unbounded)"),
    shapes: str = typer.Option(
        None, "--shapes",
        help="Shape factory as module:attribute, e.g. mysite.shapes:registry"),
) -> None:
	"""
	Summarise the frontmatter of each file in a table.
	"""
	factory = resolve_factory(shapes)
	print_summary(
	    process_paths(paths, chunk_size, max_buffer_size, factory=factory))


def entrypoint(argv=None, *, standalone_mode: bool = True):
	"""
	Typer entrypoint that defaults to `extract` when appropriate.

	Allows calling 'frontmatter-stream doc.md' without explicitly
	specifying the 'extract' subcommand.

	Parameters:
		argv: Command-line arguments. Defaults to sys.argv[1:].
		standalone_mode: If True, Click handles exit codes.

	Returns:
		Result of the Click application main invocation.
	"""
	args = sys.argv[1:] if argv is None else list(argv)

	_click_app = get_command(cli)
	commands = getattr(_click_app, "commands", {}).keys()
	# default to extract when first arg is not a command/option
	if args and not args[0].startswith("-") and args[0] not in commands:
		args = ["extract"] + args
	return _click_app.main(
	    args=args,
	    prog_name="frontmatter-stream",
	    standalone_mode=standalone_mode,
	)


if __name__ == "__main__":
	entrypoint()
