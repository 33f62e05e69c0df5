"""Data models for clipfmt."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class LineKind(Enum):
    """Structural kinds a line can take.

    Attributes:
        ORDERED_LIST: Numbered list item (``1. ``).
        UNORDERED_LIST: Bulleted list item (``- ``, ``* ``, ``+ ``).
        TASK: Checkbox item (``- [ ] ``).
        BLOCKQUOTE: Quoted line (``>``).
        HEADER: ATX header (``# ``).
        CODE_FENCE: Opening or closing fence of a code block.
        PLAIN: Any other non-empty line.
        EMPTY: Blank or whitespace-only line.
    """

    ORDERED_LIST = auto()
    UNORDERED_LIST = auto()
    TASK = auto()
    BLOCKQUOTE = auto()
    HEADER = auto()
    CODE_FENCE = auto()
    PLAIN = auto()
    EMPTY = auto()

    @property
    def is_list(self) -> bool:
        return self in (LineKind.ORDERED_LIST, LineKind.UNORDERED_LIST, LineKind.TASK)


@dataclass(frozen=True)
class Line:
    """A classified line split into its marker and content.

    Attributes:
        marker: Canonical marker prefix, or an empty string.
        content: Remainder of the line after the marker.
        kind: Structural kind detected for the line.
    """

    marker: str
    content: str
    kind: LineKind

    @property
    def text(self) -> str:
        return f"{self.marker}{self.content}"


@dataclass
class ReflowContext:
    """State carried across one paragraph reflow pass.

    Attributes:
        in_list: True while an ordered list block is open.
        in_code_block: True between an opening and a closing code fence.
    """

    in_list: bool = False
    in_code_block: bool = False


@dataclass(frozen=True)
class ClipboardPayload:
    """Formatted output ready for the clipboard.

    Attributes:
        text: Plain-text result.
        html: HTML fragment for rich-text targets, or None for plain text only.
    """

    text: str
    html: str | None = None
