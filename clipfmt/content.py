"""Content rewriting: script conversion, punctuation, and CJK spacing."""

from __future__ import annotations

from functools import lru_cache

import pangu
from opencc import OpenCC

from .config import FormatConfig
from .constants import CONTENT_PROTECT_PATTERNS, PUNCTUATION_TABLE
from .protect import PlaceholderTable


@lru_cache(maxsize=None)
def get_converter(profile: str) -> OpenCC:
    """Return a shared OpenCC converter for `profile` (for example ``"s2tw"``)."""
    return OpenCC(profile)


def convert_script(text: str, config: FormatConfig | None = None) -> str:
    """Convert Chinese characters using the configured OpenCC profile.

    Examples:
        convert_script("简体中文")  # "簡體中文"
    """
    config = config or FormatConfig()
    if not config.convert_script:
        return text
    return get_converter(config.opencc_config).convert(text)


def add_spacing(text: str, config: FormatConfig | None = None) -> str:
    """Insert spaces between CJK characters and Latin letters or digits.

    Examples:
        add_spacing("中文abc中文")  # "中文 abc 中文"
    """
    config = config or FormatConfig()
    if not config.cjk_spacing:
        return text
    return pangu.spacing_text(text)


def substitute_punctuation(text: str) -> str:
    """Rewrite half-width punctuation as full-width Chinese punctuation.

    Every occurrence of each character is replaced literally; text that is
    already full-width is left as is.

    Examples:
        substitute_punctuation("測試,測試.測試")  # "測試，測試。測試"
    """
    for half_width, full_width in PUNCTUATION_TABLE.items():
        text = text.replace(half_width, full_width)
    return text


def transform_content(content: str, config: FormatConfig | None = None) -> str:
    """Rewrite the content part of a line, leaving protected spans intact.

    Inline code, links and images, bare URLs, HTML tags, ellipses, and dotted
    tokens such as ``v1.2.3`` are swapped for placeholders first. Script
    conversion, punctuation substitution, and CJK spacing then run on the
    remaining text, in that order: punctuation is settled before spacing so
    the spacing pass never pads half-width marks. Protected spans are restored
    last.

    Args:
        content: Line content with its marker and indentation removed.
        config: Formatting configuration. Defaults to a new `FormatConfig`.

    Returns:
        str: Rewritten content.

    Examples:
        transform_content("简体,见`a.b`")  # "簡體，見`a.b`"
    """
    config = config or FormatConfig()

    table = PlaceholderTable.for_text(content)
    content = table.protect(content, CONTENT_PROTECT_PATTERNS)

    content = convert_script(content, config)
    if config.fullwidth_punctuation:
        content = substitute_punctuation(content)
    content = add_spacing(content, config)

    return table.restore(content)
