"""
Module: criteria

Purpose:
    SubjectiveEvaluation model - the four numeric criteria an external
    examiner returns for a Writing or Speaking response.

Key Classes:
    - SubjectiveEvaluation

Used By:
    - bands.subjective.reduce_subjective_criteria
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .sections import Section


WRITING_CRITERIA: tuple[str, ...] = (
    "task_achievement",
    "coherence_cohesion",
    "lexical_resource",
    "grammatical_range",
)

SPEAKING_CRITERIA: tuple[str, ...] = (
    "fluency_coherence",
    "lexical_resource",
    "grammatical_range",
    "pronunciation",
)

REQUIRED_CRITERIA: Mapping[Section, tuple[str, ...]] = MappingProxyType({
    Section.WRITING: WRITING_CRITERIA,
    Section.SPEAKING: SPEAKING_CRITERIA,
})


def required_criteria(section: Section) -> tuple[str, ...]:
    """
    Names of the criteria a section's band is averaged from.

    Raises:
        ValueError: If section is not Writing or Speaking
    """
    try:
        return REQUIRED_CRITERIA[section]
    except KeyError:
        raise ValueError(f"{section.value} is not a subjectively scored section") from None


@dataclass(frozen=True)
class SubjectiveEvaluation:
    """
    Examiner criteria for one Writing or Speaking response.

    Only the numbers take part in scoring; ``feedback`` is carried for
    display and never read by the engine.

    Attributes:
        section: Writing or Speaking
        criteria: Criterion name -> score (0.0-9.0)
        feedback: Free-text justification from the examiner
    """

    section: Section
    criteria: Mapping[str, float] = field(default_factory=dict)
    feedback: str = ""

    def __post_init__(self) -> None:
        """Validate section on construction."""
        object.__setattr__(self, "section", Section.parse(self.section))
        required_criteria(self.section)
        object.__setattr__(self, "criteria", MappingProxyType(dict(self.criteria)))

    def __hash__(self) -> int:
        return hash((self.section, tuple(sorted(self.criteria.items()))))
