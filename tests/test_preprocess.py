import pytest

from clipfmt.preprocess import (
    normalize_line_breaks,
    preprocess,
    split_fenced_segments,
    split_inline_markers,
    strip_object_replacement,
    unescape_ordered_markers,
)


def test_normalize_line_breaks():
    text = "a\r\nb\rc\u2028d\u2029e\u0085f\vg\fh"

    assert normalize_line_breaks(text) == "a\nb\nc\nd\ne\nf\ng\nh"


def test_strip_object_replacement_with_trailing_markers():
    assert strip_object_replacement("\ufffc## Title") == " Title"
    assert strip_object_replacement("a\ufffcb") == "ab"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("2\\. item", "2. item"),
        ("3\\) item", "3) item"),
        ("a\\.b", "a\\.b"),
    ],
)
def test_unescape_ordered_markers(text: str, expected: str):
    assert unescape_ordered_markers(text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("intro • one • two", "intro\n- one\n- two"),
        ("  • item", "- item"),
        ("a\n\u3000・item", "a\n- item"),
        ("步驟1. 開始2. 結束", "步驟\n1. 開始\n2. 結束"),
        ("步驟1) 開始", "步驟\n1) 開始"),
        ("說明一、背景二、方法", "說明\n一、背景\n二、方法"),
        ("二十一、開始", "二十一、開始"),
        ("總結(1)第一(2)第二", "總結\n(1)第一\n(2)第二"),
        ("text ## Title", "text\n## Title"),
        ("說明> 引用", "說明\n> 引用"),
        ("a\n   1. x", "a\n1. x"),
        ("a\n  (一)x", "a\n(一)x"),
        ("  3、x", "3、x"),
    ],
)
def test_split_inline_markers(text: str, expected: str):
    assert split_inline_markers(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "見 https://example.com/1.html",
        "見 <https://example.com/1.2>",
        "升級到 v1.2.3 版本",
        "Go to 3.5 items",
        "版本v2.0發布",
        "[第1. 章](https://example.com/#1.2)",
    ],
)
def test_urls_and_dotted_tokens_are_not_split(text: str):
    assert split_inline_markers(text) == text


def test_split_fenced_segments_round_trips():
    text = "prose\n```\ncode\n```\nmore"
    segments = split_fenced_segments(text)

    assert segments == [("prose", False), ("```\ncode\n```", True), ("more", False)]
    assert "\n".join(segment for segment, _ in segments) == text


def test_preprocess_leaves_fenced_code_alone():
    text = "說明 • a\n```\n  • b\n  1) c\n```\n  2) d"

    assert preprocess(text) == "說明\n- a\n```\n  • b\n  1) c\n```\n2) d"


def test_preprocess_runs_all_stages():
    assert preprocess("a\r\n  • b\ufffc>\n2\\. c") == "a\n- b\n2. c"


def test_adjacent_markers_split_in_one_pass():
    assert split_inline_markers("a1、2、") == "a\n1、 \n2、 "
    assert split_inline_markers("說明一、二、") == "說明\n一、\n二、"
    assert split_inline_markers("a(1)(2)") == "a\n(1)\n(2)"
