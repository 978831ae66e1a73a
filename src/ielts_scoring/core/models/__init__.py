"""
Core Models Package

Immutable data models passed between the scoring components. Every model
is a frozen dataclass: components never mutate their inputs and always
return new records.
"""

from .sections import Section, QuestionType, SECTION_ORDER
from .questions import Question, Submission
from .bands import BandRange, BandMappingTable, is_half_band
from .criteria import (
    SubjectiveEvaluation,
    WRITING_CRITERIA,
    SPEAKING_CRITERIA,
    required_criteria,
)
from .results import ScoringResult, OverallBandRecord

__all__ = [
    "Section",
    "QuestionType",
    "SECTION_ORDER",
    "Question",
    "Submission",
    "BandRange",
    "BandMappingTable",
    "is_half_band",
    "SubjectiveEvaluation",
    "WRITING_CRITERIA",
    "SPEAKING_CRITERIA",
    "required_criteria",
    "ScoringResult",
    "OverallBandRecord",
]
