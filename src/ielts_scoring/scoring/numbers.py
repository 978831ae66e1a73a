"""English words for small integers."""

from __future__ import annotations


_ONES = ("", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine")
_TEENS = (
    "ten", "eleven", "twelve", "thirteen", "fourteen",
    "fifteen", "sixteen", "seventeen", "eighteen", "nineteen",
)
_TENS = ("", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety")


def number_to_words(number: int) -> str:
    """
    Spell out 0-99 in lower-case English words.

    Compound numbers are space separated ("twenty one") so the result is
    already in normalized form. Values outside 0-99 come back as their
    decimal string.

    Example:
        >>> number_to_words(42)
        'forty two'
    """
    if number == 0:
        return "zero"
    if 0 < number < 10:
        return _ONES[number]
    if 10 <= number < 20:
        return _TEENS[number - 10]
    if 20 <= number < 100:
        tens, ones = divmod(number, 10)
        return _TENS[tens] + (f" {_ONES[ones]}" if ones else "")
    return str(number)
