"""Chinese numeral conversion for ordered-list markers."""

from __future__ import annotations

DIGITS = {
    "一": 1,
    "二": 2,
    "三": 3,
    "四": 4,
    "五": 5,
    "六": 6,
    "七": 7,
    "八": 8,
    "九": 9,
}
TEN = "十"


def chinese_to_arabic(numeral: str) -> int:
    """Convert a Chinese numeral between one and ninety-nine to an integer.

    Handles single digits, ``十``, ``十`` followed by a digit, a digit followed
    by ``十``, and digit-``十``-digit forms. Never raises; input outside that
    vocabulary yields 0, which callers treat as "no numeral".

    Args:
        numeral: Chinese numeral such as ``"三"`` or ``"二十三"``.

    Returns:
        int: Value between 1 and 99, or 0 when the numeral cannot be parsed.

    Examples:
        chinese_to_arabic("十一")  # 11
        chinese_to_arabic("二十")  # 20
        chinese_to_arabic("百")  # 0
    """
    if numeral in DIGITS:
        return DIGITS[numeral]

    if numeral == TEN:
        return 10

    if numeral.startswith(TEN):
        return 10 + DIGITS.get(numeral[1:], 0)

    if numeral.endswith(TEN):
        return DIGITS.get(numeral[:-1], 0) * 10

    ten_index = numeral.find(TEN)
    if ten_index > 0:
        tens = DIGITS.get(numeral[:ten_index], 0)
        units = DIGITS.get(numeral[ten_index + 1 :], 0)
        return tens * 10 + units

    return 0
