#!/usr/bin/env python3
"""
webpify.cli.cli

Typer-based CLI for converting a single image to WebP.

Examples
--------
Convert next to the source file at the default quality (80):

    webpify image.png

Pick a quality, or an explicit destination:

    webpify image.jpg -q 90
    webpify image.png -o converted/image.webp
"""

from __future__ import annotations

import logging
import sys
import traceback
from importlib import metadata

import click
import typer
from pydantic import ValidationError
from typer.core import TyperCommand

from webpify import __version__
from webpify.application.results import ConversionResult
from webpify.errors import InvalidQualityError, UsageError, WebpifyError
from webpify.schemas import DEFAULT_QUALITY, MAX_QUALITY, MIN_QUALITY, ParsedInvocation

app = typer.Typer(
    name="webpify",
    help="Convert an image to WebP format.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

DISTRIBUTION_NAME = "webpify"
NO_INPUT_MESSAGE = "No input file specified"
QUALITY_MESSAGE = f"Quality must be a number between {MIN_QUALITY} and {MAX_QUALITY}"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


# -----------------------------
# Utilities
# -----------------------------
def package_version() -> str:
    """Return the installed distribution version.

    Falls back to ``webpify.__version__`` when running from a source tree
    that was never installed.
    """
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return __version__


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"webpify v{package_version()}")
        raise typer.Exit()


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def parse_invocation(
    input_file: str, quality: str, output: str | None
) -> ParsedInvocation:
    """Validate raw CLI values into a :class:`ParsedInvocation`.

    Parameters
    ----------
    input_file : str
        First positional argument.
    quality : str
        Raw ``--quality`` value, parsed from its leading base-10 digits.
    output : str | None
        Raw ``--output`` value.

    Raises
    ------
    UsageError
        If the input path is empty.
    InvalidQualityError
        If quality is non-numeric or outside ``[1, 100]``.
    """
    try:
        return ParsedInvocation(
            input_file=input_file, quality=quality, output_file=output
        )
    except ValidationError as exc:
        fields = {err["loc"][0] for err in exc.errors() if err["loc"]}
        if "input_file" in fields:
            raise UsageError(NO_INPUT_MESSAGE) from exc
        if "quality" in fields:
            raise InvalidQualityError(QUALITY_MESSAGE) from exc
        raise UsageError(str(exc)) from exc


def _print_error(exc: Exception, debug: bool) -> int:
    """Print a user-facing error to stderr.

    Parameters
    ----------
    exc : Exception
        Exception raised during parsing or conversion.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"Error: {str(exc) or type(exc).__name__}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _print_summary(input_file: str, result: ConversionResult) -> None:
    typer.echo(f"✅ Converted: {input_file} → {result.output_path}")
    typer.echo(f"   Dimensions: {result.dimensions}")
    typer.echo(f"   Quality: {result.quality}")


# -----------------------------
# Command
# -----------------------------
class WebpifyCommand(TyperCommand):
    """Command reporting argument parsing failures as ``Error:`` with exit 1."""

    def make_context(
        self,
        info_name: str | None,
        args: list[str],
        parent: click.Context | None = None,
        **extra: object,
    ) -> click.Context:
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as exc:
            typer.echo(f"Error: {exc.format_message()}", err=True)
            raise typer.Exit(code=UsageError.exit_code) from exc


@app.command(cls=WebpifyCommand)
def main(
    ctx: typer.Context,
    files: list[str] | None = typer.Argument(
        None,
        metavar="FILE",
        help="Image to convert. Only the first path is used.",
        show_default=False,
    ),
    quality: str = typer.Option(
        str(DEFAULT_QUALITY),
        "--quality",
        "-q",
        metavar="N",
        help=f"Set quality ({MIN_QUALITY}-{MAX_QUALITY}).",
    ),
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        metavar="PATH",
        help="Output file path (default: same as input with .webp extension).",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=_version_callback,
        help="Show version.",
    ),
    debug: bool = typer.Option(
        False, "--debug", help="Show debug logs and full tracebacks on error."
    ),
) -> None:
    """Convert an image to WebP format."""
    del version
    _configure_logging(debug)

    if not files:
        typer.echo(f"Error: {NO_INPUT_MESSAGE}\n", err=True)
        typer.echo(ctx.get_help())
        raise typer.Exit(code=UsageError.exit_code)

    try:
        invocation = parse_invocation(files[0], quality, output)

        from webpify.api import convert_file_to_webp

        result = convert_file_to_webp(
            input_path=invocation.input_file,
            output_path=invocation.output_file,
            quality=invocation.quality,
        )
        _print_summary(invocation.input_file, result)
    except WebpifyError as exc:
        raise typer.Exit(code=_print_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_error(exc, debug))


if __name__ == "__main__":
    app()
