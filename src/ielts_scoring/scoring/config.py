"""
Module: scoring.config

Purpose:
    Configuration dataclasses for answer matching and objective scoring.
    Immutable configuration with validation on construction.

Key Classes:
    - MatchStrictness: Whether substring containment counts as a match
    - DedupPolicy: Which submission wins when a question is answered twice
    - MatcherConfig: Matcher behaviour and vocabulary
    - ScoringConfig: Objective scorer behaviour

Used By:
    - scoring.matcher.Matcher
    - scoring.objective.ObjectiveScorer
    - cli
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ..common.lexicon import DEFAULT_LEXICON, Lexicon


class MatchStrictness(Enum):
    """
    How forgiving the matcher is.

    Attributes:
        LENIENT: Every rule applies, including substring containment
            ("pari" matches "paris", "on" matches "lion"). Two answers made
            only of stop words ("in" vs "on") match.
        STRICT: Substring containment is skipped, and stop-word-only
            answers no longer match each other.
    """

    LENIENT = "lenient"
    STRICT = "strict"


class DedupPolicy(Enum):
    """
    Which submission is scored when a question was answered more than once.

    Attributes:
        FIRST_SEEN: The first submission in input order is kept.
        LATEST: The most recently submitted answer is kept. Equal or
            missing timestamps resolve to the later input position.
    """

    FIRST_SEEN = "first"
    LATEST = "latest"


@dataclass(frozen=True)
class MatcherConfig:
    """
    Configuration for the answer matcher (immutable).

    Attributes:
        strictness: LENIENT keeps substring containment and stop-word-only
            matches, STRICT drops both
        lexicon: Synonym groups and stop words
        number_words: Also match digits against their English words
            ("7" vs "seven") in the numeric rule

    Example:
        >>> MatcherConfig(strictness=MatchStrictness.STRICT).allow_substring
        False
    """

    strictness: MatchStrictness = MatchStrictness.LENIENT
    lexicon: Lexicon = field(default_factory=lambda: DEFAULT_LEXICON)
    number_words: bool = False

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not isinstance(self.strictness, MatchStrictness):
            raise ValueError(f"strictness must be a MatchStrictness: {self.strictness!r}")
        if not isinstance(self.lexicon, Lexicon):
            raise ValueError(f"lexicon must be a Lexicon: {self.lexicon!r}")

    @property
    def allow_substring(self) -> bool:
        return self.strictness is MatchStrictness.LENIENT

    @property
    def allow_bare_stop_words(self) -> bool:
        return self.strictness is MatchStrictness.LENIENT


@dataclass(frozen=True)
class ScoringConfig:
    """
    Configuration for the objective scorer (immutable).

    Attributes:
        dedup: Policy for repeated answers to one question
        matcher: Configuration handed to the matcher
    """

    dedup: DedupPolicy = DedupPolicy.FIRST_SEEN
    matcher: MatcherConfig = field(default_factory=MatcherConfig)

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not isinstance(self.dedup, DedupPolicy):
            raise ValueError(f"dedup must be a DedupPolicy: {self.dedup!r}")
        if not isinstance(self.matcher, MatcherConfig):
            raise ValueError(f"matcher must be a MatcherConfig: {self.matcher!r}")
