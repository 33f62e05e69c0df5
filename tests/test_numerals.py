import pytest

from clipfmt.numerals import chinese_to_arabic


@pytest.mark.parametrize(
    ("numeral", "expected"),
    [
        ("一", 1),
        ("九", 9),
        ("十", 10),
        ("十一", 11),
        ("十九", 19),
        ("二十", 20),
        ("二十三", 23),
        ("九十九", 99),
    ],
)
def test_chinese_to_arabic(numeral: str, expected: int):
    assert chinese_to_arabic(numeral) == expected


@pytest.mark.parametrize("numeral", ["", "百", "零", "abc", "一二"])
def test_unparseable_numeral_returns_zero(numeral: str):
    assert chinese_to_arabic(numeral) == 0
