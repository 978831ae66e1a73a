"""
Module: bands.mapper

Purpose:
    Converts an objective section's raw score into a band by scanning
    that section's BandMappingTable.

Key Classes:
    - BandMapper: Table lookup bound to a set of section tables

Used By:
    - api.map_raw_score_to_band, api.score_section
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from ..common.band_tables import DEFAULT_BAND_TABLES
from ..core.errors import RawScoreError
from ..core.models import BandMappingTable, Section

logger = logging.getLogger(__name__)


class BandMapper:
    """
    Raw score to band conversion, one table per section.

    Raw scores outside the table's [0, max_score] are rejected with
    RawScoreError rather than clamped: a score of 41 on a 40-question
    section means the caller counted wrong.

    Example:
        >>> BandMapper().map(32, Section.LISTENING)
        7.0
    """

    def __init__(self, tables: Optional[Mapping[Section, BandMappingTable]] = None):
        self.tables: dict[Section, BandMappingTable] = dict(
            DEFAULT_BAND_TABLES if tables is None else tables
        )
        for section, table in self.tables.items():
            if table.section is not section:
                raise ValueError(
                    f"Table for {table.section.value} registered under {section.value}"
                )

    def table_for(self, section: Section | str) -> BandMappingTable:
        """
        Return the table for a section.

        Raises:
            ValueError: If the section has no table (Writing, Speaking)
        """
        section = Section.parse(section)
        try:
            return self.tables[section]
        except KeyError:
            raise ValueError(f"No band table configured for {section.value}") from None

    def map(self, raw_score: int, section: Section | str) -> float:
        """
        Map a raw score to a band.

        Args:
            raw_score: Correct-answer count
            section: Listening or Reading

        Returns:
            Band of the first table row containing raw_score, 0.0 if none

        Raises:
            RawScoreError: If raw_score is not an integer in [0, max_score]
            ValueError: If the section has no table
        """
        table = self.table_for(section)
        if isinstance(raw_score, bool) or not isinstance(raw_score, int):
            raise RawScoreError(f"Raw score must be an integer: {raw_score!r}")
        if not 0 <= raw_score <= table.max_score:
            raise RawScoreError(
                f"Raw score {raw_score} outside 0..{table.max_score} "
                f"for {table.section.value}"
            )

        band_range = table.find(raw_score)
        if band_range is None:
            logger.warning(
                "No %s band range contains raw score %d, using 0.0",
                table.section.value, raw_score,
            )
            return 0.0
        return band_range.band
