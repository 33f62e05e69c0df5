"""Line classification and list-marker normalization."""

from __future__ import annotations

import re

from .constants import (
    ARABIC_ORDERED_PATTERN,
    BLOCKQUOTE_LINE_PATTERN,
    BLOCKQUOTE_PATTERN,
    BULLET_PATTERN,
    CHINESE_ORDERED_PATTERN,
    CODE_FENCE_PATTERN,
    HEADER_LINE_PATTERN,
    HEADER_PATTERN,
    INDENT_CHARS,
    ORDERED_LINE_PATTERN,
    PAREN_ORDERED_PATTERN,
    TASK_PATTERN,
    UNORDERED_LINE_PATTERN,
    UNORDERED_PATTERN,
)
from .models import Line, LineKind
from .numerals import chinese_to_arabic

# Marker patterns in priority order; the first match wins
MARKER_PATTERNS: tuple[tuple[LineKind, re.Pattern[str], str], ...] = (
    (LineKind.UNORDERED_LIST, BULLET_PATTERN, "bullet"),
    (LineKind.TASK, TASK_PATTERN, "task"),
    (LineKind.ORDERED_LIST, ARABIC_ORDERED_PATTERN, "arabic"),
    (LineKind.ORDERED_LIST, CHINESE_ORDERED_PATTERN, "chinese"),
    (LineKind.ORDERED_LIST, PAREN_ORDERED_PATTERN, "paren"),
    (LineKind.UNORDERED_LIST, UNORDERED_PATTERN, "unordered"),
    (LineKind.BLOCKQUOTE, BLOCKQUOTE_PATTERN, "blockquote"),
    (LineKind.HEADER, HEADER_PATTERN, "header"),
)


def is_code_fence(line: str) -> bool:
    """Return True when `line` opens or closes a fenced code block."""
    return CODE_FENCE_PATTERN.match(line) is not None


def strip_indent(line: str) -> str:
    """Remove leading spaces, tabs, NBSP, and ideographic spaces."""
    return line.lstrip(INDENT_CHARS)


def normalize_marker(notation: str, match: re.Match[str]) -> str:
    """Rewrite a matched marker into its canonical form.

    Every ordered notation becomes ``"N. "`` so downstream passes can detect
    list items with a single pattern. Round bullets become ``"- "``; other
    markers pass through unchanged.

    Args:
        notation: Name of the marker pattern that matched.
        match: Match object produced by that pattern.

    Returns:
        str: Canonical marker text.

    Examples:
        normalize_marker("chinese", CHINESE_ORDERED_PATTERN.match("三、內容"))  # "3. "
    """
    if notation == "bullet":
        return "- "
    if notation == "arabic":
        return f"{match.group(1)}. "
    if notation == "chinese":
        return f"{chinese_to_arabic(match.group(1))}. "
    if notation == "paren":
        numeral = match.group(1)
        number = int(numeral) if numeral.isascii() and numeral.isdigit() else chinese_to_arabic(numeral)
        return f"{number}. "
    return match.group(0)


def split_marker(line: str) -> Line:
    """Classify a line and split it into canonical marker and content.

    Leading indentation is always discarded. The line is tested against each
    marker pattern in priority order: round bullet, task checkbox, Arabic
    ordered, Chinese ordered, parenthesized ordered, unordered, blockquote,
    header.

    Args:
        line: A single line without its line feed.

    Returns:
        Line: The normalized marker, remaining content, and detected kind.

    Examples:
        split_marker("  (2) second").text  # "2. second"
        split_marker("• item").text  # "- item"
    """
    content = strip_indent(line)

    for kind, pattern, notation in MARKER_PATTERNS:
        match = pattern.match(content)
        if match:
            return Line(
                marker=normalize_marker(notation, match),
                content=content[match.end() :],
                kind=kind,
            )

    kind = LineKind.EMPTY if not content.strip() else LineKind.PLAIN
    return Line(marker="", content=content, kind=kind)


def line_kind(line: str) -> LineKind:
    """Classify a line that has already been normalized.

    Used after marker normalization, where ordered items are always ``N. ``.
    Task lines count as unordered list items here.

    Args:
        line: Normalized line, without continuation indentation.

    Returns:
        LineKind: Kind of the line.
    """
    if not line.strip():
        return LineKind.EMPTY
    if is_code_fence(line):
        return LineKind.CODE_FENCE
    if ORDERED_LINE_PATTERN.match(line):
        return LineKind.ORDERED_LIST
    if UNORDERED_LINE_PATTERN.match(line):
        return LineKind.UNORDERED_LIST
    if BLOCKQUOTE_LINE_PATTERN.match(line):
        return LineKind.BLOCKQUOTE
    if HEADER_LINE_PATTERN.match(line):
        return LineKind.HEADER
    return LineKind.PLAIN
