"""Default raw-score-to-band tables for the objective sections.

Listening and Reading are configured independently even though the
published 40-question conversion is currently the same for both.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from ..core.models import BandMappingTable, Section


# (min_score, max_score, band), highest band first as published
_FORTY_QUESTION_ROWS: tuple[tuple[int, int, float], ...] = (
    (39, 40, 9.0),
    (37, 38, 8.5),
    (35, 36, 8.0),
    (33, 34, 7.5),
    (30, 32, 7.0),
    (27, 29, 6.5),
    (23, 26, 6.0),
    (20, 22, 5.5),
    (16, 19, 5.0),
    (13, 15, 4.5),
    (10, 12, 4.0),
    (7, 9, 3.5),
    (5, 6, 3.0),
    (3, 4, 2.5),
    (1, 2, 1.0),
    (0, 0, 0.0),
)

LISTENING_BAND_TABLE = BandMappingTable.from_rows(Section.LISTENING, _FORTY_QUESTION_ROWS)
READING_BAND_TABLE = BandMappingTable.from_rows(Section.READING, _FORTY_QUESTION_ROWS)

DEFAULT_BAND_TABLES: Mapping[Section, BandMappingTable] = MappingProxyType({
    Section.LISTENING: LISTENING_BAND_TABLE,
    Section.READING: READING_BAND_TABLE,
})
