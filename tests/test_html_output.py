import pytest

from clipfmt.html_output import (
    HTML_PREFIX,
    has_anchor,
    has_list_items,
    markdown_to_html,
    transform_anchor_html,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1. a\n2. b", "<ol><li>a</li><li>b</li></ol>"),
        ("- a\n* b", "<ul><li>a</li><li>b</li></ul>"),
        ("- a\n1. b", "<ul><li>a</li></ul><ol><li>b</li></ol>"),
        ("- a\n\n- b", "<ul><li>a</li></ul><ul><li>b</li></ul>"),
        ("- a\ntext", "<ul><li>a</li></ul><p>text</p>"),
        ("1. a\n   more\n2. b", "<ol><li>a</li><li>more</li><li>b</li></ol>"),
        ("# T\n> q\ntext", "<h1>T</h1><blockquote>q</blockquote><p>text</p>"),
        ("####### deep", "<h6>deep</h6>"),
        ("a < b & c", "<p>a &lt; b &amp; c</p>"),
        ("1. <b>", "<ol><li>&lt;b&gt;</li></ol>"),
    ],
)
def test_markdown_to_html(text: str, expected: str):
    assert markdown_to_html(text) == HTML_PREFIX + expected


def test_indented_line_without_open_list_is_a_paragraph():
    assert markdown_to_html("text\n   more") == HTML_PREFIX + "<p>text</p><p>   more</p>"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1. a", True),
        ("- a", True),
        ("intro\n   - nested", True),
        ("text", False),
        ("-not a list", False),
    ],
)
def test_has_list_items(text: str, expected: bool):
    assert has_list_items(text) is expected


@pytest.mark.parametrize(
    ("fragment", "expected"),
    [
        (None, False),
        ("", False),
        ('<A HREF="x">y</A>', True),
        ("<abbr>x</abbr>", False),
    ],
)
def test_has_anchor(fragment, expected: bool):
    assert has_anchor(fragment) is expected


def test_transform_anchor_html_rewrites_only_anchor_text():
    fragment = '<p>keep, me</p><a href="x?a=1&amp;b=2">a<b>b</b> &amp; c</a>'

    result = transform_anchor_html(fragment, str.upper)

    assert result == '<p>keep, me</p><a href="x?a=1&amp;b=2">AB &amp; C</a>'


def test_transform_anchor_html_skips_blank_anchors():
    calls = []

    result = transform_anchor_html('<a href="x"> </a>', calls.append)

    assert result == '<a href="x"> </a>'
    assert calls == []
