"""
Module: results

Purpose:
    Output records of the engine. Both are recomputed wholesale whenever
    a section is re-scored; nothing patches them incrementally.

Key Classes:
    - ScoringResult: Objective section outcome
    - OverallBandRecord: Four section bands plus the overall band
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from .sections import SECTION_ORDER, Section


@dataclass(frozen=True, slots=True)
class ScoringResult:
    """
    Outcome of scoring one objective section.

    ``band`` stays None until the raw score has been mapped; use
    ``with_band`` to obtain the completed record.

    Attributes:
        total_questions: Gradable questions in the section
        correct_answers: Submissions judged correct
        accuracy: correct_answers / total_questions * 100 (0 when empty)
        band: Mapped band, once known

    Example:
        >>> result = ScoringResult(total_questions=40, correct_answers=32, accuracy=80.0)
        >>> result.raw_score
        32
    """

    total_questions: int
    correct_answers: int
    accuracy: float
    band: Optional[float] = None

    def __post_init__(self) -> None:
        """Validate counts on construction."""
        if self.total_questions < 0:
            raise ValueError(f"total_questions must be non-negative: {self.total_questions}")
        if not 0 <= self.correct_answers <= max(self.total_questions, 0):
            raise ValueError(
                f"correct_answers ({self.correct_answers}) must be within "
                f"0..total_questions ({self.total_questions})"
            )

    @property
    def raw_score(self) -> int:
        """Raw score is the correct count."""
        return self.correct_answers

    def with_band(self, band: float) -> ScoringResult:
        """Return a copy carrying the mapped band."""
        return replace(self, band=band)

    def to_dict(self) -> dict:
        return {
            "total_questions": self.total_questions,
            "correct_answers": self.correct_answers,
            "raw_score": self.raw_score,
            "accuracy": self.accuracy,
            "band": self.band,
        }


@dataclass(frozen=True, slots=True)
class OverallBandRecord:
    """
    Section bands of a session and the overall band derived from them.

    A missing section band is None. ``overall`` comes from the full
    aggregation when all four bands are present, otherwise from the
    partial aggregation over the bands that are.
    """

    overall: float
    listening: Optional[float] = None
    reading: Optional[float] = None
    writing: Optional[float] = None
    speaking: Optional[float] = None

    def band_for(self, section: Section) -> Optional[float]:
        return getattr(self, section.value)

    @property
    def section_bands(self) -> dict[Section, Optional[float]]:
        return {section: self.band_for(section) for section in SECTION_ORDER}

    @property
    def available_bands(self) -> dict[Section, float]:
        """Sections with a usable (greater than zero) band."""
        return {
            section: band
            for section, band in self.section_bands.items()
            if band is not None and band > 0
        }

    @property
    def is_complete(self) -> bool:
        """True when every section has a usable band."""
        return len(self.available_bands) == len(SECTION_ORDER)

    @property
    def descriptor(self) -> str:
        from ...common.descriptors import band_descriptor

        return band_descriptor(self.overall)

    def to_dict(self) -> dict:
        data = {section.value: band for section, band in self.section_bands.items()}
        data["overall"] = self.overall
        data["complete"] = self.is_complete
        data["descriptor"] = self.descriptor
        return data
