"""Clipboard and input helpers for clipfmt."""

from __future__ import annotations

import os

import pyperclip

from .constants import DEFAULT_CONFIG
from .exceptions import ClipboardError
from .models import ClipboardPayload

MAX_INPUT_LENGTH_ENV_VAR = "CLIPFMT_MAX_INPUT_LENGTH"


def get_max_input_length(default: int = DEFAULT_CONFIG.max_input_length) -> int:
    """Resolve the maximum accepted input length.

    Args:
        default: Fallback value in characters when the environment variable is
            unset.

    Returns:
        int: Maximum input length in characters.

    Raises:
        ValueError: If the environment value is not a positive integer.

    Examples:
        os.environ["CLIPFMT_MAX_INPUT_LENGTH"] = "5000"
        limit = get_max_input_length()
    """
    env_value = os.environ.get(MAX_INPUT_LENGTH_ENV_VAR)
    if env_value is None:
        return default

    try:
        max_length = int(env_value)
    except ValueError as error:
        error_message = (
            f"Invalid value for {MAX_INPUT_LENGTH_ENV_VAR}: {env_value} (expected positive integer)"
        )
        raise ValueError(error_message) from error

    if max_length <= 0:
        error_message = f"{MAX_INPUT_LENGTH_ENV_VAR} must be a positive integer, got {max_length}."
        raise ValueError(error_message)

    return max_length


def read_clipboard() -> str:
    """Return the plain-text contents of the system clipboard.

    Raises:
        ClipboardError: If no clipboard mechanism is available.
    """
    try:
        return pyperclip.paste()
    except pyperclip.PyperclipException as error:
        raise ClipboardError(f"Could not read the clipboard: {error}") from error


def write_clipboard(payload: ClipboardPayload) -> None:
    """Put the plain-text half of `payload` on the system clipboard.

    The HTML half is not written; pyperclip only handles plain text.

    Raises:
        ClipboardError: If no clipboard mechanism is available.
    """
    try:
        pyperclip.copy(payload.text)
    except pyperclip.PyperclipException as error:
        raise ClipboardError(f"Could not write the clipboard: {error}") from error
