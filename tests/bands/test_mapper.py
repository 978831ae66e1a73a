"""
Unit tests for BandMapper.

Verified: 2026-10-19
"""

import logging

import pytest

from ielts_scoring.bands import BandMapper
from ielts_scoring.core.errors import RawScoreError, ScoringError
from ielts_scoring.core.models import BandMappingTable, Section


class TestBandMapperDefaults:
    """Tests against the published 40-question table."""

    @pytest.mark.parametrize("raw_score, band", [
        (40, 9.0), (39, 9.0), (38, 8.5), (35, 8.0), (33, 7.5),
        (32, 7.0), (30, 7.0), (29, 6.5), (23, 6.0), (22, 5.5),
        (16, 5.0), (13, 4.5), (10, 4.0), (7, 3.5), (5, 3.0),
        (3, 2.5), (2, 1.0), (1, 1.0), (0, 0.0),
    ])
    def test_map_when_listening_score_then_published_band(self, raw_score, band):
        assert BandMapper().map(raw_score, Section.LISTENING) == band

    def test_map_when_section_name_then_parsed(self):
        assert BandMapper().map(27, "Reading") == 6.5

    @pytest.mark.parametrize("raw_score", [-1, 41, 100])
    def test_map_when_out_of_range_then_raises_error(self, raw_score):
        with pytest.raises(RawScoreError, match="outside 0..40"):
            BandMapper().map(raw_score, Section.READING)

    @pytest.mark.parametrize("raw_score", [12.5, "30", True, None])
    def test_map_when_not_integer_then_raises_error(self, raw_score):
        with pytest.raises(RawScoreError, match="must be an integer"):
            BandMapper().map(raw_score, Section.READING)

    def test_raw_score_error_when_raised_then_is_value_error(self):
        assert issubclass(RawScoreError, ValueError)
        assert issubclass(RawScoreError, ScoringError)

    def test_map_when_writing_section_then_raises_error(self):
        with pytest.raises(ValueError, match="No band table configured for writing"):
            BandMapper().map(5, Section.WRITING)


class TestBandMapperCustomTables:
    """Tests for independently configured section tables."""

    def test_map_when_custom_reading_table_then_listening_unchanged(self):
        # Arrange
        reading = BandMappingTable.from_rows(Section.READING, [(0, 19, 4.0), (20, 40, 8.0)])
        listening = BandMappingTable.from_rows(Section.LISTENING, [(0, 40, 5.0)])
        mapper = BandMapper({Section.READING: reading, Section.LISTENING: listening})

        # Act & Assert
        assert mapper.map(20, Section.READING) == 8.0
        assert mapper.map(20, Section.LISTENING) == 5.0

    def test_map_when_short_table_then_range_follows_table(self):
        table = BandMappingTable.from_rows(Section.READING, [(0, 5, 3.0), (6, 13, 6.0)])
        mapper = BandMapper({Section.READING: table})
        assert mapper.map(13, Section.READING) == 6.0
        with pytest.raises(RawScoreError, match="outside 0..13"):
            mapper.map(14, Section.READING)

    def test_init_when_table_under_wrong_section_then_raises_error(self):
        table = BandMappingTable.from_rows(Section.READING, [(0, 40, 5.0)])
        with pytest.raises(ValueError, match="registered under listening"):
            BandMapper({Section.LISTENING: table})

    def test_map_when_lookup_misses_then_zero_and_warning(self, caplog, monkeypatch):
        """A lookup miss falls back to 0.0 instead of failing."""
        # Arrange
        monkeypatch.setattr(BandMappingTable, "find", lambda self, raw_score: None)

        # Act
        with caplog.at_level(logging.WARNING, logger="ielts_scoring.bands.mapper"):
            band = BandMapper().map(10, Section.READING)

        # Assert
        assert band == 0.0
        assert "No reading band range contains raw score 10" in caplog.text
