"""
Unit tests for Lexicon.

Verified: 2026-10-19
"""

from ielts_scoring.common.lexicon import DEFAULT_LEXICON, Lexicon


class TestLexicon:
    """Tests for Lexicon synonym and stop-word handling."""

    def test_are_synonyms_when_base_and_member_then_true(self):
        assert DEFAULT_LEXICON.are_synonyms("big", "huge")
        assert DEFAULT_LEXICON.are_synonyms("huge", "big")

    def test_are_synonyms_when_two_members_then_true(self):
        """Members of one group match each other, not only the base term."""
        assert DEFAULT_LEXICON.are_synonyms("enormous", "massive")

    def test_are_synonyms_when_different_groups_then_false(self):
        assert not DEFAULT_LEXICON.are_synonyms("big", "tiny")

    def test_init_when_mixed_case_then_lowercased(self):
        lexicon = Lexicon(synonyms={"Car": ("AUTOMOBILE",)}, stop_words=frozenset({"The"}))
        assert lexicon.are_synonyms("car", "automobile")
        assert lexicon.stop_words == frozenset({"the"})

    def test_strip_stop_words_when_articles_then_removed(self):
        words = "the capital of france".split()
        assert DEFAULT_LEXICON.strip_stop_words(words) == "capital france"

    def test_default_stop_words_when_loaded_then_ten_words(self):
        assert DEFAULT_LEXICON.stop_words == frozenset(
            {"a", "an", "the", "in", "on", "at", "of", "for", "with", "by"}
        )
