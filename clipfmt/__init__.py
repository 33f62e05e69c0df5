"""
clipfmt: clipboard text reformatter for Traditional Chinese Markdown notes.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    pbpaste | clipfmt format
    clipfmt mark-done --clipboard

Library Usage:
    from clipfmt import format_text, mark_done

    format_text("简体,中文.")  # "簡體，中文。"
    mark_done("foo\\n\\nbar")  # "✅ foo\\n\\n✅ bar"
"""

from .config import ConfigError, FormatConfig
from .exceptions import ClipboardError, ClipfmtError, EmptyInputError, InputTooLargeError
from .html_output import markdown_to_html, transform_anchor_html
from .models import ClipboardPayload, Line, LineKind
from .numerals import chinese_to_arabic
from .pipeline import build_payload, format_text, mark_done
from .protect import PlaceholderTable

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "format_text",
    "mark_done",
    "build_payload",
    "markdown_to_html",
    "transform_anchor_html",
    "chinese_to_arabic",
    # Data models
    "ClipboardPayload",
    "FormatConfig",
    "Line",
    "LineKind",
    "PlaceholderTable",
    # Exceptions
    "ClipfmtError",
    "ClipboardError",
    "ConfigError",
    "EmptyInputError",
    "InputTooLargeError",
    # Version
    "__version__",
]
