"""Rewrite a URL that ends the text into a ``source:`` footer."""

from __future__ import annotations

import re

from .constants import OBJECT_REPLACEMENT, SOURCE_LABEL

TRAILING_URL_PATTERN = re.compile(r"\n?<?(https?://[^\s<>]+)>?\Z")
TRAILING_HEADINGS_PATTERN = re.compile(r"(?:\n\s*#+\s+.*)*\Z")
TRAILING_NOISE_PATTERN = re.compile(rf"[\s#><\-*+{OBJECT_REPLACEMENT}]*\Z")


def unwrap_footer(text: str, label: str = SOURCE_LABEL) -> str:
    """Turn an existing ``---`` / ``label: URL`` footer back into a trailing URL.

    Formatting already formatted text then rebuilds the same footer instead
    of treating the label line as content.

    Examples:
        unwrap_footer("hello\\n\\n---\\n\\nsource: http://example.com")
        # "hello\\nhttp://example.com"
    """
    match = re.search(
        rf"(?:\A|\n)[ \t]*---[ \t]*\n\s*{re.escape(label)}:[ \t]*(https?://[^\s<>]+)\s*\Z", text
    )
    if not match:
        return text

    body = text[: match.start()].rstrip()
    url = match.group(1)
    return f"{body}\n{url}" if body else url


def find_trailing_url(text: str) -> tuple[str, int] | None:
    """Locate a bare URL at the very end of `text`.

    The URL may be wrapped in angle brackets. A URL directly preceded by
    ``(`` is the target of Markdown link syntax and does not count.

    Args:
        text: Text without trailing whitespace.

    Returns:
        tuple[str, int] | None: The URL and the index where the removed span
            starts (including a ``<`` prefix), or None when the text does not
            end in a bare URL.
    """
    match = TRAILING_URL_PATTERN.search(text)
    if not match:
        return None

    url = match.group(1).rstrip(">")
    start = text.rfind(url)
    if start > 0 and text[start - 1] == "(":
        return None
    if start > 0 and text[start - 1] == "<":
        start -= 1
    return url, start


def strip_trailing_noise(body: str) -> str:
    """Drop trailing heading lines and leftover Markdown markers from `body`."""
    body = TRAILING_HEADINGS_PATTERN.sub("", body, count=1)
    return TRAILING_NOISE_PATTERN.sub("", body, count=1)


def rewrite_trailing_url(text: str, label: str = SOURCE_LABEL) -> str:
    """Turn a URL at the end of the text into a ``---`` / ``source:`` footer.

    Headings directly above the URL are treated as its title and dropped,
    along with stray Markdown marker characters. The ``---`` rule is
    surrounded by blank lines so editors do not read it as a setext heading.

    Args:
        text: Reflowed text.
        label: Footer label written before the URL.

    Returns:
        str: Text with the footer, or `text` unchanged when it does not end in
            a bare URL.

    Examples:
        rewrite_trailing_url("hello\\nhttp://example.com")
        # "hello\\n\\n---\\n\\nsource: http://example.com"
        rewrite_trailing_url("<https://example.com>")
        # "---\\n\\nsource: https://example.com"
    """
    trimmed = text.rstrip()
    found = find_trailing_url(trimmed)
    if found is None:
        return text

    url, start = found
    body = strip_trailing_noise(trimmed[:start].rstrip())

    if body:
        return f"{body}\n\n---\n\n{label}: {url}"
    return f"---\n\n{label}: {url}"
