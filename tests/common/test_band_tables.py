"""
Unit tests for default band tables and descriptors.

Verified: 2026-10-19
"""

import pytest

from ielts_scoring.common import DEFAULT_BAND_TABLES, band_descriptor
from ielts_scoring.core.models import Section


class TestDefaultBandTables:
    """Tests for the published 40-question tables."""

    @pytest.mark.parametrize("section", [Section.LISTENING, Section.READING])
    def test_tables_when_loaded_then_cover_zero_to_forty(self, section):
        table = DEFAULT_BAND_TABLES[section]
        assert table.max_score == 40
        assert all(table.find(score) is not None for score in range(41))

    def test_tables_when_loaded_then_configured_independently(self):
        listening = DEFAULT_BAND_TABLES[Section.LISTENING]
        reading = DEFAULT_BAND_TABLES[Section.READING]
        assert listening is not reading
        assert listening.ranges == reading.ranges

    def test_tables_when_loaded_then_no_writing_table(self):
        assert Section.WRITING not in DEFAULT_BAND_TABLES


class TestBandDescriptor:
    """Tests for band_descriptor."""

    @pytest.mark.parametrize("band, expected", [
        (9.0, "Expert User"),
        (8.5, "Very Good User"),
        (7.0, "Good User"),
        (6.5, "Competent User"),
        (5.0, "Modest User"),
        (4.5, "Limited User"),
        (3.0, "Extremely Limited User"),
        (2.5, "Intermittent User"),
        (1.0, "Non User"),
        (0.5, "Non User"),
        (0.0, "Did not attempt"),
    ])
    def test_descriptor_when_half_band_then_label(self, band, expected):
        assert band_descriptor(band) == expected

    @pytest.mark.parametrize("band", [6.25, 9.5, -1.0, None, "7"])
    def test_descriptor_when_off_grid_then_unknown(self, band):
        assert band_descriptor(band) == "Unknown"
