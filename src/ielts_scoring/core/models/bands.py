"""
Module: bands

Purpose:
    Raw-score-to-band conversion tables. A table is data, not logic: the
    mapper only scans it, so every invariant that makes the scan correct
    is checked here when the table is built.

Key Classes:
    - BandRange: One inclusive {min_score, max_score} -> band row
    - BandMappingTable: Ordered, gapless set of rows for one section

Dependencies:
    - dataclasses (std)
    - .sections.Section

Used By:
    - common.band_tables: default Listening/Reading tables
    - bands.mapper.BandMapper
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from .sections import Section


MAX_BAND = 9.0
MIN_BAND = 0.0


def is_half_band(value: float) -> bool:
    """True when value lies on the 0.5 grid inside [0, 9]."""
    return MIN_BAND <= value <= MAX_BAND and (value * 2) == int(value * 2)


@dataclass(frozen=True, slots=True)
class BandRange:
    """
    Inclusive raw-score range mapped to a single band.

    Invariants:
        - 0 <= min_score <= max_score
        - band is a half band in [0, 9]

    Example:
        >>> BandRange(30, 32, 7.0).contains(31)
        True
    """

    min_score: int
    max_score: int
    band: float

    def __post_init__(self) -> None:
        """Validate range on construction."""
        if self.min_score < 0:
            raise ValueError(f"min_score must be non-negative: {self.min_score}")
        if self.max_score < self.min_score:
            raise ValueError(
                f"max_score ({self.max_score}) must be >= min_score ({self.min_score})"
            )
        if not is_half_band(self.band):
            raise ValueError(f"band must be a half band in [0, 9]: {self.band}")

    def contains(self, raw_score: int) -> bool:
        """Check whether raw_score falls inside this range."""
        return self.min_score <= raw_score <= self.max_score

    def to_dict(self) -> dict:
        return {"min_score": self.min_score, "max_score": self.max_score, "band": self.band}


@dataclass(frozen=True)
class BandMappingTable:
    """
    Raw-score-to-band table for one section (immutable).

    Rows are kept in the order given; the mapper returns the first row
    containing the score, so published tables can be written top-down
    (highest band first) exactly as they appear in print.

    Attributes:
        section: Section the table converts scores for
        ranges: Table rows

    Invariants:
        - Rows do not overlap and leave no gap: every integer in
          [0, max_score] falls in exactly one row
        - Bands never decrease as raw score increases

    Example:
        >>> table = BandMappingTable(Section.LISTENING, (
        ...     BandRange(0, 0, 0.0), BandRange(1, 40, 5.0),
        ... ))
        >>> table.max_score
        40
    """

    section: Section
    ranges: tuple[BandRange, ...]

    def __post_init__(self) -> None:
        """Validate coverage and monotonicity on construction."""
        object.__setattr__(self, "section", Section.parse(self.section))
        if not isinstance(self.ranges, tuple):
            object.__setattr__(self, "ranges", tuple(self.ranges))
        if not self.ranges:
            raise ValueError(f"{self.section.value} band table has no ranges")

        ordered = sorted(self.ranges, key=lambda r: r.min_score)
        if ordered[0].min_score != 0:
            raise ValueError(
                f"{self.section.value} band table must start at 0, "
                f"starts at {ordered[0].min_score}"
            )
        for lower, upper in zip(ordered, ordered[1:]):
            if upper.min_score <= lower.max_score:
                raise ValueError(
                    f"{self.section.value} band table ranges overlap: "
                    f"{lower.min_score}-{lower.max_score} and {upper.min_score}-{upper.max_score}"
                )
            if upper.min_score != lower.max_score + 1:
                raise ValueError(
                    f"{self.section.value} band table has a gap between "
                    f"{lower.max_score} and {upper.min_score}"
                )
            if upper.band < lower.band:
                raise ValueError(
                    f"{self.section.value} band table is not monotonic: "
                    f"{upper.min_score}-{upper.max_score} -> {upper.band} "
                    f"is below {lower.band}"
                )

    def __iter__(self) -> Iterator[BandRange]:
        return iter(self.ranges)

    @property
    def max_score(self) -> int:
        """Highest raw score the table covers."""
        return max(r.max_score for r in self.ranges)

    def find(self, raw_score: int) -> Optional[BandRange]:
        """Return the first row containing raw_score, or None."""
        for band_range in self.ranges:
            if band_range.contains(raw_score):
                return band_range
        return None

    @classmethod
    def from_rows(cls, section: Section, rows: Iterable[tuple[int, int, float]]) -> BandMappingTable:
        """
        Build a table from (min_score, max_score, band) triples.

        Example:
            >>> BandMappingTable.from_rows(Section.READING, [(0, 20, 4.0), (21, 40, 7.0)])
        """
        return cls(section=section, ranges=tuple(BandRange(lo, hi, band) for lo, hi, band in rows))

    def to_dict(self) -> dict:
        return {
            "section": self.section.value,
            "ranges": [r.to_dict() for r in self.ranges],
        }
