import pytest

from clipfmt.config import FormatConfig
from clipfmt.models import LineKind
from clipfmt.reflow import needs_blank_line, reflow_lines


@pytest.mark.parametrize(
    ("lines", "expected"),
    [
        (["first", "second"], ["first", "", "second"]),
        (["- a", "- b"], ["- a", "- b"]),
        (["1. a", "2. b"], ["1. a", "2. b"]),
        (["> a", "> b"], ["> a", "> b"]),
        (["# Title", "text"], ["# Title", "", "text"]),
        (["# Title", "- a"], ["# Title", "", "- a"]),
        (["text", "# Title"], ["text", "", "# Title"]),
        (["text", "- a"], ["text", "- a"]),
        (["- a", "text"], ["- a", "text"]),
        (["- a", "> q"], ["- a", "> q"]),
        (["> q", "text"], ["> q", "text"]),
        (["a", "", "b"], ["a", "", "b"]),
    ],
)
def test_blank_line_rules(lines: list[str], expected: list[str]):
    assert reflow_lines(lines) == expected


def test_continuation_lines_are_indented_under_ordered_list():
    lines = ["1. a", "continued", "- sub", "2. b"]

    assert reflow_lines(lines) == ["1. a", "   continued", "   - sub", "2. b"]


def test_list_context_survives_blank_lines():
    assert reflow_lines(["1. a", "", "more"]) == ["1. a", "", "   more"]


def test_list_context_closes_on_header_and_blockquote():
    assert reflow_lines(["1. a", "# H", "text"]) == ["1. a", "# H", "", "text"]
    assert reflow_lines(["1. a", "> q", "text"]) == ["1. a", "> q", "text"]


def test_unordered_list_does_not_open_context():
    assert reflow_lines(["- a", "text"]) == ["- a", "text"]


def test_continuation_indent_is_configurable():
    config = FormatConfig(continuation_indent=4)

    assert reflow_lines(["1. a", "more"], config) == ["1. a", "    more"]


def test_fenced_code_is_passed_through():
    lines = ["text", "```", "- x", "plain", "", "1. y", "```", "a", "b"]

    assert reflow_lines(lines) == [
        "text",
        "```",
        "- x",
        "plain",
        "",
        "1. y",
        "```",
        "a",
        "",
        "b",
    ]


def test_list_context_does_not_leak_between_calls():
    reflow_lines(["1. a"])

    assert reflow_lines(["text"]) == ["text"]


@pytest.mark.parametrize(
    ("current", "following", "expected"),
    [
        (LineKind.PLAIN, LineKind.EMPTY, False),
        (LineKind.CODE_FENCE, LineKind.PLAIN, False),
        (LineKind.PLAIN, LineKind.CODE_FENCE, False),
        (LineKind.HEADER, LineKind.HEADER, True),
        (LineKind.HEADER, LineKind.BLOCKQUOTE, True),
        (LineKind.PLAIN, LineKind.BLOCKQUOTE, False),
        (LineKind.PLAIN, LineKind.PLAIN, True),
    ],
)
def test_needs_blank_line(current: LineKind, following: LineKind, expected: bool):
    assert needs_blank_line(current, following) is expected
