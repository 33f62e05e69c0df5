"""Placeholder protection for spans that text rewriting must not touch."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from .exceptions import ClipfmtError

# Tokens are built from a pair of Unicode private-use code points
PRIVATE_USE_START = 0xE000
PRIVATE_USE_END = 0xF8FF


@dataclass(frozen=True)
class Placeholder:
    """A protected span recorded by a `PlaceholderTable`.

    Attributes:
        index: Position of the span in protection order.
        original: Exact text that was replaced.
    """

    index: int
    original: str


@dataclass
class PlaceholderTable:
    """Ordered record of protected spans and the tokens standing in for them.

    Tokens have the form ``<opener><index><closer>`` where the opener and
    closer are private-use characters absent from the protected text, so a
    token can never collide with surviving content. Neither character is CJK,
    Latin, or punctuation, so script conversion, punctuation rewriting and
    CJK spacing all leave tokens alone.

    Attributes:
        opener: Character starting every token.
        closer: Character ending every token.
        entries: Protected spans in the order they were captured.
    """

    opener: str
    closer: str
    entries: list[Placeholder] = field(default_factory=list)

    @classmethod
    def for_text(cls, text: str) -> PlaceholderTable:
        """Create a table whose token characters do not occur in `text`.

        Raises:
            ClipfmtError: If every private-use pair already appears in `text`.
        """
        code = PRIVATE_USE_START
        while chr(code) in text or chr(code + 1) in text:
            code += 2
            if code + 1 > PRIVATE_USE_END:
                raise ClipfmtError("No free placeholder characters left for this text")
        return cls(opener=chr(code), closer=chr(code + 1))

    def token(self, index: int) -> str:
        return f"{self.opener}{index}{self.closer}"

    def protect(self, text: str, patterns: Iterable[re.Pattern[str]]) -> str:
        """Replace every match of each pattern, in order, with a fresh token.

        Later patterns see the tokens inserted by earlier ones, so they cannot
        match inside a span that is already protected.

        Args:
            text: Text to redact.
            patterns: Compiled patterns in priority order.

        Returns:
            str: Text with protected spans swapped for tokens.

        Examples:
            table = PlaceholderTable.for_text("see `x`")
            table.protect("see `x`", [INLINE_CODE_PATTERN])  # "see \\ue0000\\ue001"
        """
        for pattern in patterns:
            text = pattern.sub(self._stash, text)
        return text

    def restore(self, text: str) -> str:
        """Put every protected span back in place of its token.

        Entries are restored from last to first: a span captured by a later
        pattern may itself contain an earlier token, which only reappears once
        the enclosing span is restored. A token missing from `text` is skipped.

        Args:
            text: Text containing tokens produced by this table.

        Returns:
            str: Text with the original spans restored.
        """
        for entry in reversed(self.entries):
            text = text.replace(self.token(entry.index), entry.original, 1)
        return text

    def _stash(self, match: re.Match[str]) -> str:
        entry = Placeholder(index=len(self.entries), original=match.group(0))
        self.entries.append(entry)
        return self.token(entry.index)


def protect(text: str, patterns: Iterable[re.Pattern[str]]) -> tuple[str, PlaceholderTable]:
    """Protect spans of `text` matched by `patterns`.

    Returns:
        tuple[str, PlaceholderTable]: Redacted text and the table needed to
            restore it.
    """
    table = PlaceholderTable.for_text(text)
    return table.protect(text, patterns), table


def restore(text: str, table: PlaceholderTable) -> str:
    """Restore spans recorded in `table`."""
    return table.restore(text)
