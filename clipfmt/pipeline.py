"""Pipeline driver for the ``format`` and ``mark-done`` commands."""

from __future__ import annotations

import logging
from functools import partial

from .classifier import is_code_fence, split_marker
from .config import FormatConfig
from .content import add_spacing, convert_script, transform_content
from .exceptions import EmptyInputError, InputTooLargeError
from .footer import rewrite_trailing_url, unwrap_footer
from .html_output import has_anchor, has_list_items, markdown_to_html, transform_anchor_html
from .models import ClipboardPayload
from .preprocess import preprocess
from .reflow import reflow_lines

logger = logging.getLogger(__name__)


def _blank_line_positions(text: str) -> list[int]:
    return [index for index, line in enumerate(text.split("\n")) if not line.strip()]


def check_input(text: str | None, config: FormatConfig) -> str:
    """Reject empty or oversized input.

    Raises:
        EmptyInputError: If `text` is None or whitespace only.
        InputTooLargeError: If `text` is longer than `config.max_input_length`.
    """
    if text is None or not text.strip():
        raise EmptyInputError()
    if len(text) > config.max_input_length:
        raise InputTooLargeError(len(text), config.max_input_length)
    return text


def transform_lines(lines: list[str], config: FormatConfig | None = None) -> list[str]:
    """Normalize markers and rewrite content line by line.

    Fence lines and everything between them are passed through byte for byte.

    Args:
        lines: Lines of the preprocessed document.
        config: Formatting configuration. Defaults to a new `FormatConfig`.

    Returns:
        list[str]: Lines with canonical markers and rewritten content.
    """
    config = config or FormatConfig()
    in_code_block = False
    transformed: list[str] = []

    for line in lines:
        if is_code_fence(line):
            in_code_block = not in_code_block
            transformed.append(line)
            continue

        if in_code_block:
            transformed.append(line)
            continue

        parsed = split_marker(line)
        transformed.append(parsed.marker + transform_content(parsed.content, config))

    return transformed


def format_text(text: str, config: FormatConfig | None = None) -> str:
    """Run the full reformatting pipeline on `text`.

    Stages, in order: document preprocessing, per-line marker normalization
    and content rewriting, paragraph reflow, and trailing-URL rewriting. A
    footer left by an earlier run is unwrapped first, so formatting the
    output again leaves it unchanged.

    Args:
        text: Raw clipboard text.
        config: Formatting configuration. Defaults to a new `FormatConfig`.

    Returns:
        str: Reformatted text.

    Raises:
        EmptyInputError: If `text` has no visible characters.
        InputTooLargeError: If `text` exceeds the configured maximum length.

    Examples:
        format_text("测试,测试.测试")  # "測試，測試。測試"
        format_text("hello\\nhttp://example.com")
        # "hello\\n\\n---\\n\\nsource: http://example.com"
    """
    config = config or FormatConfig()
    text = check_input(text, config)
    logger.debug(
        "format input: %d lines, blank at %s",
        text.count("\n") + 1,
        _blank_line_positions(text),
    )

    text = unwrap_footer(preprocess(text), config.source_label)
    lines = transform_lines(text.split("\n"), config)
    lines = reflow_lines(lines, config)
    result = rewrite_trailing_url("\n".join(lines), config.source_label)

    logger.debug(
        "format output: %d lines, blank at %s",
        result.count("\n") + 1,
        _blank_line_positions(result),
    )
    return result


def mark_done(text: str, config: FormatConfig | None = None) -> str:
    """Prefix every non-empty line with the completion marker.

    Each marked line is stripped, script-converted, and CJK-spaced. Blank
    lines are kept verbatim.

    Examples:
        mark_done("foo\\n\\nbar")  # "✅ foo\\n\\n✅ bar"
    """
    config = config or FormatConfig()
    text = check_input(text, config)

    marked: list[str] = []
    for line in text.split("\n"):
        trimmed = line.strip()
        if not trimmed:
            marked.append(line)
            continue
        marked.append(f"{config.done_marker} {add_spacing(convert_script(trimmed, config), config)}")
    return "\n".join(marked)


def build_payload(
    text: str, html: str | None = None, config: FormatConfig | None = None
) -> ClipboardPayload:
    """Format `text` and choose the rich-text counterpart to deliver with it.

    When the incoming HTML holds links, only the anchor text is rewritten and
    the surrounding markup is kept. Otherwise, when the result contains list
    syntax, an HTML fragment is generated so editors receive real lists.
    Plain text alone is returned in every other case.

    Args:
        text: Raw clipboard text.
        html: Rich-text counterpart read alongside `text`, if any.
        config: Formatting configuration. Defaults to a new `FormatConfig`.

    Returns:
        ClipboardPayload: Formatted text and optional HTML.
    """
    config = config or FormatConfig()
    formatted = format_text(text, config)

    if html is not None and has_anchor(html):
        logger.debug("rich input has anchors; rewriting anchor text only")
        return ClipboardPayload(
            text=formatted,
            html=transform_anchor_html(html, partial(format_text, config=config)),
        )
    if has_list_items(formatted):
        logger.debug("result has list items; generating HTML lists")
        return ClipboardPayload(text=formatted, html=markdown_to_html(formatted))
    return ClipboardPayload(text=formatted)
