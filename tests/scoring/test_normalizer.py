"""
Unit tests for answer normalization.

Verified: 2026-10-19
"""

import pytest

from ielts_scoring.scoring import normalize


class TestNormalize:
    """Tests for normalize."""

    @pytest.mark.parametrize("raw, expected", [
        ("Paris", "paris"),
        ("  New   York  ", "new york"),
        ("B)", "b"),
        ("(a)", "a"),
        ('"the station."', "the station"),
        ("Eiffel - Tower", "eiffel tower"),
        ("Café\tcrème", "café crème"),
        ("rock'n'roll", "rocknroll"),
        ("snake_case", "snakecase"),
    ])
    def test_normalize_when_text_then_canonical(self, raw, expected):
        assert normalize(raw) == expected

    @pytest.mark.parametrize("raw", [None, 7, 3.5, ["paris"], {"answer": "paris"}])
    def test_normalize_when_not_string_then_empty(self, raw):
        """Non-string input never raises."""
        assert normalize(raw) == ""

    def test_normalize_when_only_punctuation_then_empty(self):
        assert normalize(" ?! ... ") == ""

    def test_normalize_when_applied_twice_then_unchanged(self):
        once = normalize("  Hello -- World!! ")
        assert normalize(once) == once == "hello world"
