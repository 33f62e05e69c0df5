"""
Reformats clipboard text: script conversion, CJK spacing, full-width
punctuation, list markers, and paragraph breaks.
Reads from a file, stdin, or the system clipboard and writes the result back.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import TextIO, TypeVar

import click

from .clipboard import get_max_input_length, read_clipboard, write_clipboard
from .config import OPENCC_CONFIGS, ConfigError, FormatConfig, apply_overrides, build_config
from .exceptions import ClipboardError, ClipfmtError, EmptyInputError
from .html_output import markdown_to_html
from .models import ClipboardPayload
from .pipeline import build_payload, mark_done

__all__ = ["cli"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _load_config(**overrides: object) -> FormatConfig:
    try:
        config = build_config(Path.cwd(), **overrides)
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        max_input_length = get_max_input_length(default=config.max_input_length)
    except ValueError as error:
        raise click.ClickException(str(error)) from error

    return apply_overrides(config, max_input_length=max_input_length)


def _read_source(source: TextIO, use_clipboard: bool) -> str:
    if not use_clipboard:
        return source.read()
    try:
        return read_clipboard()
    except ClipboardError as error:
        raise click.ClickException(str(error)) from error


def _run(step: Callable[[], T]) -> T | None:
    """Run a pipeline step and translate its failures for the terminal.

    Empty input is reported as a notice and yields None. Known errors become
    `click.ClickException`; anything else is logged and reported as a generic
    failure.
    """
    try:
        return step()
    except EmptyInputError as error:
        click.echo(str(error), err=True)
        return None
    except ClipfmtError as error:
        raise click.ClickException(str(error)) from error
    except Exception as error:
        logger.exception("Pipeline failure")
        raise click.ClickException("Could not process text") from error


def _deliver(payload: ClipboardPayload, use_clipboard: bool, emit: str, notice: str) -> None:
    """Print the requested output or put the plain text on the clipboard.

    The clipboard only ever receives plain text; with ``--emit html`` the HTML
    fragment is printed as well.
    """
    html = None
    if emit == "html":
        html = payload.html if payload.html is not None else markdown_to_html(payload.text)

    if use_clipboard:
        try:
            write_clipboard(payload)
        except ClipboardError as error:
            raise click.ClickException(str(error)) from error
        click.echo(notice, err=True)

    if html is not None:
        click.echo(html)
    elif not use_clipboard:
        click.echo(payload.text)


@click.group()
@click.version_option()
@click.option("-v", "--verbose", is_flag=True, help="Log pipeline diagnostics to stderr")
def cli(verbose: bool = False):
    """
    Reformat clipboard text for Traditional Chinese Markdown notes.

    Examples:
        pbpaste | clipfmt format
        clipfmt format --clipboard
        clipfmt mark-done notes.txt
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@cli.command("format")
@click.option(
    "-c", "--clipboard", "use_clipboard", is_flag=True, help="Read from and write to the clipboard"
)
@click.option(
    "--html-input",
    type=click.File("r", encoding="utf-8"),
    help="Rich-text (HTML) counterpart of the input",
)
@click.option(
    "--emit",
    type=click.Choice(["text", "html"]),
    default="text",
    show_default=True,
    help="Print the plain text or the HTML fragment; the clipboard always gets plain text",
)
@click.option("--opencc-config", type=click.Choice(OPENCC_CONFIGS), help="OpenCC conversion profile")
@click.option("--convert/--no-convert", default=None, help="Toggle Chinese script conversion")
@click.option(
    "--punctuation/--no-punctuation", default=None, help="Toggle full-width punctuation"
)
@click.option("--spacing/--no-spacing", default=None, help="Toggle CJK/Latin spacing")
@click.option("--continuation-indent", type=int, help="Spaces before list continuation lines")
@click.option("--source-label", help="Label written before a trailing URL")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-", required=False)
def format_command(
    source: TextIO,
    use_clipboard: bool = False,
    html_input: TextIO | None = None,
    emit: str = "text",
    opencc_config: str | None = None,
    convert: bool | None = None,
    punctuation: bool | None = None,
    spacing: bool | None = None,
    continuation_indent: int | None = None,
    source_label: str | None = None,
):
    """
    Reformat text from SOURCE (default: stdin) or the clipboard.

    Args:
        source: File to read when the clipboard is not used.
        use_clipboard: Read the clipboard and write the result back to it.
        html_input: Optional HTML counterpart of the input.
        emit: Whether to output the plain text or the HTML fragment.
        opencc_config: Override for the OpenCC conversion profile.
        convert: Override for Chinese script conversion.
        punctuation: Override for full-width punctuation.
        spacing: Override for CJK/Latin spacing.
        continuation_indent: Override for list continuation indentation.
        source_label: Override for the trailing-URL footer label.

    Raises:
        click.BadParameter: If configuration values are invalid.
        click.ClickException: If the clipboard is unavailable or formatting fails.

    Examples:
        clipfmt format --no-spacing --emit html notes.md
    """
    config = _load_config(
        opencc_config=opencc_config,
        convert_script=convert,
        fullwidth_punctuation=punctuation,
        cjk_spacing=spacing,
        continuation_indent=continuation_indent,
        source_label=source_label,
    )
    text = _read_source(source, use_clipboard)
    html = html_input.read() if html_input is not None else None

    payload = _run(lambda: build_payload(text, html, config))
    if payload is None:
        return
    _deliver(payload, use_clipboard, emit, "Formatted text copied to the clipboard")


@cli.command("mark-done")
@click.option(
    "-c", "--clipboard", "use_clipboard", is_flag=True, help="Read from and write to the clipboard"
)
@click.option("--done-marker", help="Prefix added to each non-empty line")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-", required=False)
def mark_done_command(
    source: TextIO, use_clipboard: bool = False, done_marker: str | None = None
):
    """
    Prefix each non-empty line of SOURCE (default: stdin) with a done marker.

    Examples:
        clipfmt mark-done --clipboard
    """
    config = _load_config(done_marker=done_marker)
    text = _read_source(source, use_clipboard)

    marked = _run(lambda: mark_done(text, config))
    if marked is None:
        return
    _deliver(ClipboardPayload(text=marked), use_clipboard, "text", "Lines marked as done")


if __name__ == "__main__":
    cli()
