"""
IELTS Scoring Core Package

Shared data models, the engine's exception hierarchy and payload
validation. Every other package builds on these; nothing here depends on
the scoring or band packages.
"""

from .errors import ScoringError, MissingCriterionError, BandRangeError, RawScoreError
from .models import (
    Section,
    QuestionType,
    Question,
    Submission,
    BandRange,
    BandMappingTable,
    SubjectiveEvaluation,
    ScoringResult,
    OverallBandRecord,
)

__all__ = [
    "ScoringError",
    "MissingCriterionError",
    "BandRangeError",
    "RawScoreError",
    "Section",
    "QuestionType",
    "Question",
    "Submission",
    "BandRange",
    "BandMappingTable",
    "SubjectiveEvaluation",
    "ScoringResult",
    "OverallBandRecord",
]
