"""Canonical form of answer text used before any comparison."""

from __future__ import annotations

from typing import Any


def normalize(text: Any) -> str:
    """
    Canonicalize a raw answer for comparison.

    Lower-cases, removes every character that is neither alphanumeric
    nor whitespace, collapses whitespace runs to one space and trims.
    Non-string input gives the empty string. Punctuation is removed
    before whitespace is collapsed so the result is a fixed point:
    ``normalize(normalize(x)) == normalize(x)``.

    Example:
        >>> normalize("  The  Eiffel-Tower! ")
        'the eiffeltower'
    """
    if not isinstance(text, str):
        return ""
    kept = "".join(ch for ch in text.lower() if ch.isalnum() or ch.isspace())
    return " ".join(kept.split())
