"""Package-specific exception types."""

from __future__ import annotations


class ClipfmtError(Exception):
    """Base class for clipfmt errors."""


class EmptyInputError(ClipfmtError):
    """Raised when the input holds no text to format.

    The CLI reports this as a notice rather than a failure.
    """

    def __init__(self, message: str = "No text selected"):
        super().__init__(message)


class InputTooLargeError(ClipfmtError):
    """Raised when the input exceeds the configured maximum length.

    Args:
        length: Number of characters in the input.
        max_input_length: Maximum allowed number of characters.
    """

    def __init__(self, length: int, max_input_length: int):
        self.length = length
        self.max_input_length = max_input_length
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return (
            f"Input has {self.length} characters, exceeding the maximum allowed "
            f"length of {self.max_input_length} characters"
        )


class ClipboardError(ClipfmtError):
    """Raised when the system clipboard cannot be read or written."""
