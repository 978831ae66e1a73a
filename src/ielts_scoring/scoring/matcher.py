"""
Module: scoring.matcher

Purpose:
    Decides whether a candidate answer matches an accepted answer. Both
    strings must already be normalized (see scoring.normalizer).

Rules, tried in order until one matches:
    0. Guard: an empty string never matches anything
    1. Exact: equal strings
    2. Substring: one contains the other, both longer than one character
       (LENIENT strictness only)
    3. Numeric: both are base-10 integers with equal value; with
       ``number_words`` enabled a number also matches its English words
    4. Synonym: both words belong to one lexicon group
    5. Stop words: equal once articles and prepositions are removed; two
       answers made only of stop words match in LENIENT strictness only
    6. Word set: for multi-word answers, every accepted word appears in
       the candidate in any order

Key Classes:
    - MatchRule: Identifies the rule that produced a match
    - Matcher: Rule evaluation bound to a MatcherConfig

Used By:
    - scoring.objective.ObjectiveScorer
"""

from __future__ import annotations

import logging
import unicodedata
from enum import Enum
from typing import Iterable, Optional

from .config import MatcherConfig
from .numbers import number_to_words

logger = logging.getLogger(__name__)


class MatchRule(Enum):
    """Rule that accepted a candidate answer."""

    EXACT = "exact"
    SUBSTRING = "substring"
    NUMERIC = "numeric"
    SYNONYM = "synonym"
    STOP_WORDS = "stop_words"
    WORD_SET = "word_set"


class Matcher:
    """
    Tolerant comparison of normalized answers.

    Stateless apart from its configuration, so one instance can be shared
    across threads and sessions.

    Example:
        >>> matcher = Matcher()
        >>> matcher.matches("huge", "big")
        True
        >>> matcher.match_rule("07", "7")
        <MatchRule.NUMERIC: 'numeric'>
    """

    def __init__(self, config: Optional[MatcherConfig] = None):
        self.config = config or MatcherConfig()

    def matches(self, candidate: str, accepted: str) -> bool:
        """True when candidate matches the accepted answer."""
        return self.match_rule(candidate, accepted) is not None

    def matches_any(self, candidate: str, accepted_answers: Iterable[str]) -> bool:
        """True when candidate matches at least one accepted answer."""
        return any(self.matches(candidate, accepted) for accepted in accepted_answers)

    def match_rule(self, candidate: str, accepted: str) -> Optional[MatchRule]:
        """
        Return the first rule under which candidate matches, or None.

        Args:
            candidate: Normalized submitted answer
            accepted: Normalized accepted answer
        """
        if not candidate or not accepted:
            return None

        if candidate == accepted:
            return MatchRule.EXACT

        if self.config.allow_substring and len(candidate) > 1 and len(accepted) > 1:
            if candidate in accepted or accepted in candidate:
                return MatchRule.SUBSTRING

        if self._numbers_match(candidate, accepted):
            return MatchRule.NUMERIC

        if self.config.lexicon.are_synonyms(candidate, accepted):
            return MatchRule.SYNONYM

        candidate_words = candidate.split()
        accepted_words = accepted.split()

        lexicon = self.config.lexicon
        stripped = lexicon.strip_stop_words(candidate_words)
        if stripped == lexicon.strip_stop_words(accepted_words):
            # Answers made only of stop words match only in LENIENT mode
            if stripped or self.config.allow_bare_stop_words:
                return MatchRule.STOP_WORDS

        if len(candidate_words) > 1 or len(accepted_words) > 1:
            if set(accepted_words) <= set(candidate_words):
                return MatchRule.WORD_SET

        return None

    def _numbers_match(self, candidate: str, accepted: str) -> bool:
        # Compared as digit strings; int() refuses very long inputs
        candidate_digits = _canonical_digits(candidate) if candidate.isdecimal() else None
        accepted_digits = _canonical_digits(accepted) if accepted.isdecimal() else None
        if candidate_digits is not None and accepted_digits is not None:
            return candidate_digits == accepted_digits
        if not self.config.number_words:
            return False
        if candidate_digits is not None:
            return _digits_to_words(candidate_digits) == accepted
        if accepted_digits is not None:
            return _digits_to_words(accepted_digits) == candidate
        return False


def _canonical_digits(digits: str) -> str:
    ascii_digits = "".join(str(unicodedata.decimal(char)) for char in digits)
    return ascii_digits.lstrip("0") or "0"


def _digits_to_words(digits: str) -> Optional[str]:
    if len(digits) > 2:
        return None
    return number_to_words(int(digits))


_DEFAULT_MATCHER = Matcher()


def matches(candidate: str, accepted: str) -> bool:
    """Match two normalized answers with the default configuration."""
    return _DEFAULT_MATCHER.matches(candidate, accepted)
