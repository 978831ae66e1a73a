"""Synonym groups and stop words used by the tolerant answer matcher.

The tables are plain data wrapped in an immutable ``Lexicon`` so a matcher
can be built with a different vocabulary (tests substitute tiny fixtures,
deployments can extend the groups) without touching matching logic.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from types import MappingProxyType
from typing import Iterable, Mapping


DEFAULT_SYNONYMS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "big": ("large", "huge", "enormous", "massive"),
    "small": ("little", "tiny", "minute", "petite"),
    "happy": ("glad", "pleased", "joyful", "delighted"),
    "sad": ("unhappy", "sorrowful", "miserable", "depressed"),
    "good": ("excellent", "great", "wonderful", "fine"),
    "bad": ("terrible", "awful", "horrible", "poor"),
    "quick": ("fast", "rapid", "swift", "speedy"),
    "slow": ("sluggish", "gradual", "leisurely"),
})

DEFAULT_STOP_WORDS: frozenset[str] = frozenset(
    {"a", "an", "the", "in", "on", "at", "of", "for", "with", "by"}
)


@dataclass(frozen=True)
class Lexicon:
    """
    Vocabulary for the synonym and stop-word matching rules.

    Attributes:
        synonyms: Base term -> other members of its group. The base term
            belongs to its own group.
        stop_words: Words dropped before the stop-word comparison

    Example:
        >>> lex = Lexicon(synonyms={"big": ("large",)}, stop_words=frozenset({"the"}))
        >>> lex.are_synonyms("large", "big")
        True
    """

    synonyms: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: DEFAULT_SYNONYMS)
    stop_words: frozenset[str] = DEFAULT_STOP_WORDS

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "synonyms",
            MappingProxyType({
                base.lower(): tuple(word.lower() for word in members)
                for base, members in self.synonyms.items()
            }),
        )
        object.__setattr__(self, "stop_words", frozenset(w.lower() for w in self.stop_words))

    def __hash__(self) -> int:
        return hash((tuple(sorted(self.synonyms.items())), self.stop_words))

    @cached_property
    def groups(self) -> tuple[frozenset[str], ...]:
        """Each synonym group as a set, base term included."""
        return tuple(frozenset((base, *members)) for base, members in self.synonyms.items())

    def are_synonyms(self, first: str, second: str) -> bool:
        """True when both words belong to one group."""
        return any(first in group and second in group for group in self.groups)

    def strip_stop_words(self, words: Iterable[str]) -> str:
        """Join the words that are not stop words with single spaces."""
        return " ".join(word for word in words if word not in self.stop_words)


DEFAULT_LEXICON = Lexicon()
