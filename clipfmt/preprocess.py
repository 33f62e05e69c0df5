"""Document-level normalization that runs before the text is split into lines."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from .classifier import is_code_fence
from .constants import (
    CHINESE_NUMERALS,
    INDENT,
    INDENT_CHARS,
    NON_INDENT,
    OBJECT_REPLACEMENT,
    SPLIT_PROTECT_PATTERNS,
    VERTICAL_WHITESPACE,
)
from .protect import PlaceholderTable

logger = logging.getLogger(__name__)

OBJECT_REPLACEMENT_PATTERN = re.compile(rf"{OBJECT_REPLACEMENT}[#>\-*+]*")
ESCAPED_ORDERED_PATTERN = re.compile(r"([0-9]+)\\([.)])")

_ARABIC_DOT = r"[0-9]+[.、]"
_ARABIC_PAREN = r"[0-9]+\)"
_CHINESE = rf"[{CHINESE_NUMERALS}]+、"
_PARENTHESIZED = rf"[（(][{CHINESE_NUMERALS}0-9]+[)）]"

# Applied in order. Markers glued to preceding text get their own line;
# markers already at a line start lose their indentation.
INLINE_MARKER_REPAIRS: tuple[tuple[re.Pattern[str], str, int], ...] = (
    # Round bullets
    (re.compile(rf"(\n){INDENT}[•・]{INDENT}"), r"\1- ", 0),
    (re.compile(rf"({NON_INDENT}){INDENT}[•・]{INDENT}"), r"\1\n- ", 0),
    # Blockquotes and headers
    (re.compile(rf"({NON_INDENT}){INDENT}>{INDENT}"), r"\1\n> ", 0),
    (re.compile(rf"([^{INDENT_CHARS}\n#]){INDENT}(#+\s)"), r"\1\n\2", 0),
    (re.compile(rf"\A{INDENT}[•・]{INDENT}"), "- ", 1),
    # Ordered lists; a preceding digit or opening paren means the number is
    # part of a larger token such as 12 or (1). Lookbehinds let adjacent
    # markers such as 1、2、 split in a single pass.
    (re.compile(rf"(?<=[^\s0-9(（]){INDENT}({_ARABIC_DOT})[ \t]*"), r"\n\1 ", 0),
    (re.compile(rf"(?<=[^\s0-9(（]){INDENT}({_ARABIC_PAREN})[ \t]*"), r"\n\1 ", 0),
    (re.compile(rf"(?<=[^\s{CHINESE_NUMERALS}]){INDENT}({_CHINESE})"), r"\n\1", 0),
    (re.compile(rf"(?<=\S){INDENT}({_PARENTHESIZED})"), r"\n\1", 0),
    (re.compile(rf"(\n){INDENT}([0-9]+[.、)])"), r"\1\2", 0),
    (re.compile(rf"(\n){INDENT}({_CHINESE})"), r"\1\2", 0),
    (re.compile(rf"(\n){INDENT}({_PARENTHESIZED})"), r"\1\2", 0),
    (re.compile(rf"\A{INDENT}([0-9]+[.、)])"), r"\1", 1),
    (re.compile(rf"\A{INDENT}({_CHINESE})"), r"\1", 1),
    (re.compile(rf"\A{INDENT}({_PARENTHESIZED})"), r"\1", 1),
)


def normalize_line_breaks(text: str) -> str:
    """Convert every vertical-whitespace variant to a line feed."""
    for separator in VERTICAL_WHITESPACE:
        text = text.replace(separator, "\n")
    return text


def strip_object_replacement(text: str) -> str:
    """Drop U+FFFC and any Markdown marker characters glued to it."""
    return OBJECT_REPLACEMENT_PATTERN.sub("", text)


def unescape_ordered_markers(text: str) -> str:
    r"""Turn ``2\.`` and ``2\)`` back into ``2.`` and ``2)``."""
    return ESCAPED_ORDERED_PATTERN.sub(r"\1\2", text)


def split_inline_markers(text: str) -> str:
    """Move list, quote, and header markers onto their own lines.

    Text pasted from rendered sources often loses the line breaks in front of
    list markers (``intro • one • two``). Links, URLs, and dotted tokens such as
    ``v1.2.3`` or ``3.5`` are protected for the duration so the repairs never
    fire inside them.

    Examples:
        split_inline_markers("intro • one • two")  # "intro\\n- one\\n- two"
    """
    table = PlaceholderTable.for_text(text)
    text = table.protect(text, SPLIT_PROTECT_PATTERNS)

    for pattern, replacement, count in INLINE_MARKER_REPAIRS:
        text = pattern.sub(replacement, text, count=count)

    return table.restore(text)


# Stages applied to prose; line breaks are normalized first, on the whole text
PREPROCESS_STAGES: tuple[Callable[[str], str], ...] = (
    strip_object_replacement,
    unescape_ordered_markers,
    split_inline_markers,
)


def split_fenced_segments(text: str) -> list[tuple[str, bool]]:
    """Split text into runs of prose and fenced code.

    Fence lines belong to the code run they open or close.

    Returns:
        list[tuple[str, bool]]: Segment text and whether it is fenced code,
            in document order. Joining the segments with line feeds yields
            `text` again.
    """
    segments: list[tuple[str, bool]] = []
    buffer: list[str] = []
    buffer_is_code = False
    in_code_block = False

    for line in text.split("\n"):
        fence = is_code_fence(line)
        line_is_code = in_code_block or fence
        if fence:
            in_code_block = not in_code_block

        if buffer and line_is_code != buffer_is_code:
            segments.append(("\n".join(buffer), buffer_is_code))
            buffer = []
        buffer_is_code = line_is_code
        buffer.append(line)

    segments.append(("\n".join(buffer), buffer_is_code))
    return segments


def preprocess(text: str) -> str:
    """Run the document-level normalization stages in order.

    Line breaks are normalized across the whole text. The remaining stages
    only see prose; fenced code blocks pass through byte for byte.

    Args:
        text: Raw input text.

    Returns:
        str: Text with normalized line breaks and repaired marker placement.

    Examples:
        preprocess("步驟1. 開始2. 結束")  # "步驟\\n1. 開始\\n2. 結束"
    """
    text = normalize_line_breaks(text)

    segments = []
    for segment, is_code in split_fenced_segments(text):
        if is_code:
            logger.debug("preprocess: skipping fenced block of %d lines", segment.count("\n") + 1)
        else:
            for stage in PREPROCESS_STAGES:
                segment = stage(segment)
        segments.append(segment)
    return "\n".join(segments)
