"""
Module: api

Purpose:
    The operations the exam platform calls. Each is a plain function
    over in-memory data with no I/O, safe to call concurrently for
    different sessions.

Key Functions:
    - score_objective_answers(submissions, questions): Raw score/accuracy
    - map_raw_score_to_band(raw_score, section): Table lookup
    - reduce_subjective_criteria(criteria, section): Mean of criteria
    - aggregate_overall_band(l, r, w, s): Overall band, IELTS rounding
    - score_section(...): Objective scoring plus band mapping
    - subjective_section_band(criteria, section): Mean rounded to 0.5
    - build_band_report(...): OverallBandRecord for a session
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Union

from .bands import (
    BandMapper,
    aggregate_overall,
    aggregate_partial,
    reduce_criteria,
    round_to_half_band,
)
from .core.models import (
    OverallBandRecord,
    Question,
    ScoringResult,
    Section,
    SubjectiveEvaluation,
)
from .scoring import ObjectiveScorer, ScoringConfig

_DEFAULT_MAPPER = BandMapper()


def score_objective_answers(
    submissions: Iterable[Any],
    questions: Iterable[Question],
    config: Optional[ScoringConfig] = None,
) -> ScoringResult:
    """Count correct answers; the result's band is left unset."""
    return ObjectiveScorer(config).score(submissions, questions)


def map_raw_score_to_band(
    raw_score: int,
    section: Section | str,
    mapper: Optional[BandMapper] = None,
) -> float:
    """Convert a Listening/Reading raw score to its band."""
    return (mapper or _DEFAULT_MAPPER).map(raw_score, section)


def reduce_subjective_criteria(
    criteria: Union[SubjectiveEvaluation, Mapping[str, Any]],
    section: Optional[Section | str] = None,
) -> float:
    """Unrounded mean of a Writing/Speaking response's four criteria."""
    return reduce_criteria(criteria, section)


def aggregate_overall_band(
    listening_band: float,
    reading_band: float,
    writing_band: float,
    speaking_band: float,
) -> float:
    """Overall band from the four section bands."""
    return aggregate_overall(listening_band, reading_band, writing_band, speaking_band)


def score_section(
    submissions: Iterable[Any],
    questions: Iterable[Question],
    section: Section | str,
    config: Optional[ScoringConfig] = None,
    mapper: Optional[BandMapper] = None,
) -> ScoringResult:
    """
    Score an objective section and attach its band.

    Example:
        >>> result = score_section(submissions, questions, "listening")
        >>> result.band
        7.0
    """
    result = score_objective_answers(submissions, questions, config)
    return result.with_band(map_raw_score_to_band(result.raw_score, section, mapper))


def subjective_section_band(
    criteria: Union[SubjectiveEvaluation, Mapping[str, Any]],
    section: Optional[Section | str] = None,
) -> float:
    """Section band to store for Writing/Speaking: the mean rounded to 0.5."""
    return round_to_half_band(reduce_criteria(criteria, section))


def _is_scored(band: Any) -> bool:
    return isinstance(band, (int, float)) and not isinstance(band, bool) and band > 0


def build_band_report(
    listening: Optional[float] = None,
    reading: Optional[float] = None,
    writing: Optional[float] = None,
    speaking: Optional[float] = None,
) -> OverallBandRecord:
    """
    Assemble a session's band record.

    Uses the full aggregation when all four bands are above zero and the
    partial aggregation over the available bands otherwise.
    """
    bands = (listening, reading, writing, speaking)
    if all(_is_scored(band) for band in bands):
        overall = aggregate_overall(*bands)
    else:
        overall = aggregate_partial(bands)
    return OverallBandRecord(
        overall=overall,
        listening=listening,
        reading=reading,
        writing=writing,
        speaking=speaking,
    )


def is_session_complete(record: OverallBandRecord) -> bool:
    """True when every section of the session has a band."""
    return record.is_complete
