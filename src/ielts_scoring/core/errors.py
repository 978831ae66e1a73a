"""
Module: core.errors

Purpose:
    Exception hierarchy for the scoring engine. Every error raised on
    purpose by the engine derives from ScoringError so callers can catch
    engine failures in one place.

Used By:
    - bands.mapper, bands.subjective, bands.aggregate
    - core.schemas.validator
    - cli
"""

from __future__ import annotations


class ScoringError(Exception):
    """Base class for all scoring engine errors."""


class MissingCriterionError(ScoringError, KeyError):
    """
    Raised when a subjective evaluation lacks a required criterion.

    Attributes:
        section: Section the criteria were supplied for
        missing: Names of the absent criteria
    """

    def __init__(self, section: str, missing: list[str]):
        self.section = section
        self.missing = list(missing)
        super().__init__(f"{section} criteria missing required fields: {self.missing}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class BandRangeError(ScoringError, ValueError):
    """Raised when a band or criterion value is not a number in [0, 9]."""


class RawScoreError(ScoringError, ValueError):
    """Raised when a raw score is not an integer inside the table range."""
