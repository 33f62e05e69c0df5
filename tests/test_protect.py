from clipfmt.constants import (
    BARE_URL_PATTERN,
    CONTENT_PROTECT_PATTERNS,
    INLINE_CODE_PATTERN,
    LINK_PATTERN,
)
from clipfmt.protect import Placeholder, PlaceholderTable, protect, restore


def test_protect_replaces_spans_with_tokens():
    redacted, table = protect("run `make test` now", [INLINE_CODE_PATTERN])

    assert "`" not in redacted
    assert redacted == f"run {table.token(0)} now"
    assert table.entries == [Placeholder(index=0, original="`make test`")]


def test_restore_returns_original_text():
    text = "see [docs](https://example.com/a_(b)) and `x.y` at https://example.com/v1.2"
    redacted, table = protect(text, CONTENT_PROTECT_PATTERNS)

    assert "https" not in redacted
    assert restore(redacted, table) == text


def test_indices_increase_in_protection_order():
    _, table = protect("`a` `b` http://c.com", [INLINE_CODE_PATTERN, BARE_URL_PATTERN])

    assert [entry.index for entry in table.entries] == [0, 1, 2]
    assert [entry.original for entry in table.entries] == ["`a`", "`b`", "http://c.com"]


def test_links_are_protected_before_bare_urls():
    _, table = protect("[site](https://example.com)", [LINK_PATTERN, BARE_URL_PATTERN])

    assert [entry.original for entry in table.entries] == ["[site](https://example.com)"]


def test_span_enclosing_an_earlier_token_is_fully_restored():
    text = "http://example.com`code`"
    redacted, table = protect(text, [INLINE_CODE_PATTERN, BARE_URL_PATTERN])

    assert redacted == table.token(1)
    assert restore(redacted, table) == text


def test_token_characters_avoid_existing_text():
    text = "\ue000\ue001 `x`"
    redacted, table = protect(text, [INLINE_CODE_PATTERN])

    assert table.opener not in text
    assert table.closer not in text
    assert restore(redacted, table) == text


def test_restore_skips_missing_tokens():
    table = PlaceholderTable.for_text("")
    table.protect("`x`", [INLINE_CODE_PATTERN])

    assert table.restore("no tokens here") == "no tokens here"
