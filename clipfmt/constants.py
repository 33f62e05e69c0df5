"""Constants used across the clipfmt package."""

from __future__ import annotations

import re

from .config import FormatConfig

DEFAULT_CONFIG = FormatConfig()

# Horizontal whitespace that may indent a marker (space, tab, NBSP, ideographic space)
INDENT_CHARS = " \t\u00a0\u3000"
INDENT = f"[{INDENT_CHARS}]*"
NON_INDENT = f"[^{INDENT_CHARS}\n]"

CHINESE_NUMERALS = "一二三四五六七八九十"
OBJECT_REPLACEMENT = "\ufffc"

VERTICAL_WHITESPACE = ("\r\n", "\r", "\u2028", "\u2029", "\u0085", "\v", "\f")

# Half-width to full-width punctuation, applied by literal replacement
PUNCTUATION_TABLE = {
    ",": "，",
    ".": "。",
    "?": "？",
    "!": "！",
    ":": "：",
    ";": "；",
    "(": "（",
    ")": "）",
}

# Protected span patterns
INLINE_CODE_PATTERN = re.compile(r"`[^`]+`")
# Links and images, allowing one level of nested parentheses inside the URL
LINK_PATTERN = re.compile(r"!?\[[^\]]*\]\((?:[^()]|\([^)]*\))*\)")
# Bare URLs stop before `)` so the closing paren of Markdown link syntax survives
BARE_URL_PATTERN = re.compile(r"https?://[^\s)]+")
AUTOLINK_URL_PATTERN = re.compile(r"<?(https?://[^\s<>)]+)>?")
HTML_TAG_PATTERN = re.compile(r"<[^>]+>")
ELLIPSIS_PATTERN = re.compile(r"\.{2,}")
DOTTED_TOKEN_PATTERN = re.compile(r"[a-zA-Z0-9]+(?:\.[a-zA-Z0-9]+)+")

CONTENT_PROTECT_PATTERNS = (
    INLINE_CODE_PATTERN,
    LINK_PATTERN,
    BARE_URL_PATTERN,
    HTML_TAG_PATTERN,
    ELLIPSIS_PATTERN,
    DOTTED_TOKEN_PATTERN,
)
# Spans the inline marker split must not break apart
SPLIT_PROTECT_PATTERNS = (LINK_PATTERN, AUTOLINK_URL_PATTERN, DOTTED_TOKEN_PATTERN)

# Marker patterns, tested in priority order by the classifier
BULLET_PATTERN = re.compile(r"^[•・]\s*")
TASK_PATTERN = re.compile(r"^[-*+]\s+\[[ xX]\]\s+")
# A digit after the mark means a decimal or version number, not a marker
ARABIC_ORDERED_PATTERN = re.compile(r"^([0-9]+)[.、)](?![0-9])\s*")
CHINESE_ORDERED_PATTERN = re.compile(rf"^([{CHINESE_NUMERALS}]+)、\s*")
PAREN_ORDERED_PATTERN = re.compile(rf"^[（(]([{CHINESE_NUMERALS}]+|[0-9]+)[)）]\s*")
UNORDERED_PATTERN = re.compile(r"^[-*+]\s+")
BLOCKQUOTE_PATTERN = re.compile(r"^>\s*")
HEADER_PATTERN = re.compile(r"^#+\s+")

# Post-normalization line kinds
ORDERED_LINE_PATTERN = re.compile(r"^[0-9]+[.)]\s")
UNORDERED_LINE_PATTERN = re.compile(r"^[-*+]\s")
BLOCKQUOTE_LINE_PATTERN = re.compile(r"^>")
HEADER_LINE_PATTERN = re.compile(r"^#+\s")
CODE_FENCE_PATTERN = re.compile(r"^\s*```")

SOURCE_LABEL = DEFAULT_CONFIG.source_label
