"""
Unit tests for number_to_words.

Verified: 2026-10-19
"""

import pytest

from ielts_scoring.scoring import number_to_words


@pytest.mark.parametrize("number, expected", [
    (0, "zero"),
    (7, "seven"),
    (13, "thirteen"),
    (20, "twenty"),
    (42, "forty two"),
    (99, "ninety nine"),
    (100, "100"),
    (-3, "-3"),
])
def test_number_to_words_when_number_then_words(number, expected):
    assert number_to_words(number) == expected
