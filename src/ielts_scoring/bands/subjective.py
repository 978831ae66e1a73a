"""
Module: bands.subjective

Purpose:
    Reduces the four examiner criteria of a Writing or Speaking response
    to one section band, and rounds bands onto the half-point grid.

Key Functions:
    - reduce_criteria(criteria, section): Unrounded mean of the criteria
    - round_to_half_band(value): Nearest 0.5, halves rounding up
"""

from __future__ import annotations

import math
import re
from typing import Mapping, Optional, Union

from ..core.errors import BandRangeError, MissingCriterionError
from ..core.models import Section, SubjectiveEvaluation, required_criteria
from ..core.models.bands import MAX_BAND, MIN_BAND


_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _snake_case(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def _criterion_value(name: str, value: object, section: Section) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or math.isnan(value):
        raise BandRangeError(f"{section.value} criterion {name} is not a number: {value!r}")
    if not MIN_BAND <= value <= MAX_BAND:
        raise BandRangeError(f"{section.value} criterion {name} outside 0-9: {value}")
    return float(value)


def reduce_criteria(
    criteria: Union[SubjectiveEvaluation, Mapping[str, object]],
    section: Optional[Section | str] = None,
) -> float:
    """
    Average the four criteria of a section into its band.

    No rounding happens here; the mean may fall between half bands.
    Criterion names may be snake_case or camelCase ("taskAchievement").
    Extra keys are ignored.

    Args:
        criteria: A SubjectiveEvaluation, or a criterion mapping
        section: Writing or Speaking; taken from the evaluation if omitted

    Returns:
        Unweighted mean of the required criteria

    Raises:
        MissingCriterionError: If a required criterion is absent, or
            criteria is not a mapping at all
        BandRangeError: If a criterion is not a number in [0, 9]
        ValueError: If section is missing or not Writing/Speaking
    """
    if isinstance(criteria, SubjectiveEvaluation):
        section = criteria.section if section is None else section
        criteria = criteria.criteria
    if section is None:
        raise ValueError("section is required when passing a criteria mapping")
    section = Section.parse(section)
    required = required_criteria(section)
    if not isinstance(criteria, Mapping):
        raise MissingCriterionError(section.value, list(required))

    values = {_snake_case(str(key)): value for key, value in criteria.items()}
    missing = [name for name in required if name not in values]
    if missing:
        raise MissingCriterionError(section.value, missing)

    scores = [_criterion_value(name, values[name], section) for name in required]
    return sum(scores) / len(scores)


def round_to_half_band(value: float) -> float:
    """
    Round to the nearest 0.5, with exact quarters rounding up.

    Example:
        >>> round_to_half_band(6.25)
        6.5
        >>> round_to_half_band(6.2)
        6.0
    """
    return math.floor(value * 2 + 0.5) / 2
