"""
Objective answer scoring: normalization, matching and section scoring.
"""

from .config import DedupPolicy, MatchStrictness, MatcherConfig, ScoringConfig
from .normalizer import normalize
from .numbers import number_to_words
from .matcher import Matcher, MatchRule, matches
from .formats import validate_answer_format, MIN_ESSAY_WORDS
from .objective import ObjectiveScorer, score_objective

__all__ = [
    "DedupPolicy",
    "MatchStrictness",
    "MatcherConfig",
    "ScoringConfig",
    "normalize",
    "number_to_words",
    "Matcher",
    "MatchRule",
    "matches",
    "validate_answer_format",
    "MIN_ESSAY_WORDS",
    "ObjectiveScorer",
    "score_objective",
]
