"""HTML fragments for rich-text clipboard targets."""

from __future__ import annotations

import html
import re
from collections.abc import Callable

HTML_PREFIX = '<meta charset="utf-8">'

ORDERED_ITEM_PATTERN = re.compile(r"^(\s*)(\d+)\.\s+(.*)$")
UNORDERED_ITEM_PATTERN = re.compile(r"^(\s*)([-*+])\s+(.*)$")
HEADER_PATTERN = re.compile(r"^(#+)\s+(.*)$")
BLOCKQUOTE_PATTERN = re.compile(r"^>\s*(.*)$")
CONTINUATION_PATTERN = re.compile(r"^(\s{3,})(.*)$")
ANCHOR_PATTERN = re.compile(r"<a\s+([^>]*)>(.*?)</a>", re.IGNORECASE)
ANCHOR_OPEN_PATTERN = re.compile(r"<a\s", re.IGNORECASE)
TAG_PATTERN = re.compile(r"<[^>]+>")
LIST_ITEM_PATTERNS = (
    re.compile(r"^\s*(\d+)\.\s+", re.MULTILINE),
    re.compile(r"^\s*[-*+]\s+", re.MULTILINE),
)


def has_list_items(text: str) -> bool:
    """Return True when `text` contains ordered or unordered list syntax."""
    return any(pattern.search(text) for pattern in LIST_ITEM_PATTERNS)


def has_anchor(fragment: str | None) -> bool:
    """Return True when an HTML fragment contains an ``<a>`` tag."""
    return bool(fragment) and ANCHOR_OPEN_PATTERN.search(fragment) is not None


class _ListState:
    """Track which list element is open while emitting HTML."""

    def __init__(self) -> None:
        self.parts: list[str] = []
        self.open_tag: str | None = None

    def open(self, tag: str) -> None:
        if self.open_tag == tag:
            return
        self.close()
        self.parts.append(f"<{tag}>")
        self.open_tag = tag

    def close(self) -> None:
        if self.open_tag is not None:
            self.parts.append(f"</{self.open_tag}>")
            self.open_tag = None

    def emit(self, fragment: str) -> None:
        self.parts.append(fragment)


def markdown_to_html(text: str) -> str:
    """Project Markdown-like text onto a minimal HTML fragment.

    Ordered and unordered list lines become ``<ol>``/``<ul>`` items, header
    lines become ``<h1>``-``<h6>``, quote lines become ``<blockquote>``, and
    other non-empty lines become ``<p>``. Blank lines close an open list.
    Lines indented by three or more spaces under an open list are emitted as
    additional list items. All text is HTML-escaped.

    Args:
        text: Formatted text.

    Returns:
        str: HTML fragment prefixed with a UTF-8 meta tag.

    Examples:
        markdown_to_html("1. a\\n2. b")
        # '<meta charset="utf-8"><ol><li>a</li><li>b</li></ol>'
    """
    state = _ListState()

    for line in text.split("\n"):
        ordered = ORDERED_ITEM_PATTERN.match(line)
        unordered = UNORDERED_ITEM_PATTERN.match(line)
        header = HEADER_PATTERN.match(line)
        quote = BLOCKQUOTE_PATTERN.match(line)

        if ordered:
            state.open("ol")
            state.emit(f"<li>{html.escape(ordered.group(3))}</li>")
        elif unordered:
            state.open("ul")
            state.emit(f"<li>{html.escape(unordered.group(3))}</li>")
        elif header:
            state.close()
            level = min(len(header.group(1)), 6)
            state.emit(f"<h{level}>{html.escape(header.group(2))}</h{level}>")
        elif quote:
            state.close()
            state.emit(f"<blockquote>{html.escape(quote.group(1))}</blockquote>")
        elif not line.strip():
            state.close()
        else:
            continuation = CONTINUATION_PATTERN.match(line)
            if continuation and state.open_tag is not None:
                state.emit(f"<li>{html.escape(continuation.group(2))}</li>")
            else:
                state.close()
                state.emit(f"<p>{html.escape(line)}</p>")

    state.close()
    return HTML_PREFIX + "".join(state.parts)


def transform_anchor_html(fragment: str, transform: Callable[[str], str]) -> str:
    """Rewrite the text inside ``<a>`` tags, keeping tags and attributes.

    Inner markup is dropped and entities are decoded before `transform` runs;
    the result is escaped again before it goes back inside the anchor.

    Args:
        fragment: HTML taken from the clipboard.
        transform: Function applied to each anchor's plain text.

    Returns:
        str: HTML with only anchor text rewritten.

    Examples:
        transform_anchor_html('<a href="x">简体</a>', format_text)
        # '<a href="x">簡體</a>'
    """

    def _rewrite(match: re.Match[str]) -> str:
        attributes, inner = match.group(1), match.group(2)
        plain = html.unescape(TAG_PATTERN.sub("", inner))
        rewritten = transform(plain) if plain.strip() else plain
        return f"<a {attributes}>{html.escape(rewritten, quote=False)}</a>"

    return ANCHOR_PATTERN.sub(_rewrite, fragment)
