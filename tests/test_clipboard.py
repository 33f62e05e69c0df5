import pyperclip
import pytest

import clipfmt.clipboard as clipboard_module
from clipfmt.clipboard import (
    MAX_INPUT_LENGTH_ENV_VAR,
    get_max_input_length,
    read_clipboard,
    write_clipboard,
)
from clipfmt.exceptions import ClipboardError
from clipfmt.models import ClipboardPayload


def test_get_max_input_length_defaults(monkeypatch):
    monkeypatch.delenv(MAX_INPUT_LENGTH_ENV_VAR, raising=False)

    assert get_max_input_length(123) == 123


def test_get_max_input_length_reads_environment(monkeypatch):
    monkeypatch.setenv(MAX_INPUT_LENGTH_ENV_VAR, "5000")

    assert get_max_input_length(123) == 5000


@pytest.mark.parametrize("value", ["abc", "0", "-5", "1.5"])
def test_get_max_input_length_rejects_invalid_values(monkeypatch, value: str):
    monkeypatch.setenv(MAX_INPUT_LENGTH_ENV_VAR, value)

    with pytest.raises(ValueError, match=MAX_INPUT_LENGTH_ENV_VAR):
        get_max_input_length()


def test_read_and_write_clipboard(monkeypatch):
    copied = []
    monkeypatch.setattr(clipboard_module.pyperclip, "paste", lambda: "简体")
    monkeypatch.setattr(clipboard_module.pyperclip, "copy", copied.append)

    assert read_clipboard() == "简体"
    write_clipboard(ClipboardPayload(text="簡體", html="<p>簡體</p>"))
    assert copied == ["簡體"]


def test_clipboard_failures_are_wrapped(monkeypatch):
    def _unavailable(*_args):
        raise pyperclip.PyperclipException("no mechanism")

    monkeypatch.setattr(clipboard_module.pyperclip, "paste", _unavailable)
    monkeypatch.setattr(clipboard_module.pyperclip, "copy", _unavailable)

    with pytest.raises(ClipboardError, match="no mechanism"):
        read_clipboard()
    with pytest.raises(ClipboardError, match="Could not write"):
        write_clipboard(ClipboardPayload(text="x"))
