"""
Unit tests for the tolerant answer matcher.

Verified: 2026-10-19
"""

import pytest

from ielts_scoring.scoring import (
    Matcher,
    MatcherConfig,
    MatchRule,
    MatchStrictness,
    matches,
)


@pytest.fixture
def matcher():
    return Matcher()


class TestGuard:
    """Empty strings never match."""

    @pytest.mark.parametrize("candidate, accepted", [
        ("", "paris"),
        ("paris", ""),
        ("", ""),
    ])
    def test_matches_when_either_empty_then_false(self, matcher, candidate, accepted):
        assert matcher.matches(candidate, accepted) is False


class TestRuleOrder:
    """Each rule in isolation, reported through match_rule."""

    @pytest.mark.parametrize("candidate, accepted, rule", [
        ("paris", "paris", MatchRule.EXACT),
        ("pari", "paris", MatchRule.SUBSTRING),
        ("the paris", "paris", MatchRule.SUBSTRING),
        ("07", "7", MatchRule.NUMERIC),
        ("huge", "big", MatchRule.SYNONYM),
        ("enormous", "massive", MatchRule.SYNONYM),
        ("capital of france", "the capital france", MatchRule.STOP_WORDS),
        ("hot dry summer", "summer dry", MatchRule.WORD_SET),
    ])
    def test_match_rule_when_pair_then_expected_rule(self, matcher, candidate, accepted, rule):
        assert matcher.match_rule(candidate, accepted) is rule

    def test_match_rule_when_nothing_applies_then_none(self, matcher):
        assert matcher.match_rule("london", "paris") is None

    def test_substring_when_single_character_then_not_applied(self, matcher):
        """Single letters must not match inside longer answers."""
        assert matcher.matches("a", "cat") is False
        assert matcher.matches("b", "a") is False

    def test_substring_when_lenient_then_known_false_positive(self, matcher):
        """Lenient matching accepts "on" inside "lion"."""
        assert matcher.matches("on", "lion") is True

    def test_substring_when_strict_then_skipped(self):
        strict = Matcher(MatcherConfig(strictness=MatchStrictness.STRICT))
        assert strict.matches("pari", "paris") is False
        assert strict.matches("on", "lion") is False
        assert strict.matches("paris", "paris") is True


class TestNumericRule:
    """Tests for numeric equivalence."""

    def test_numeric_when_words_disabled_then_digit_word_mismatch(self, matcher):
        assert matcher.matches("7", "seven") is False

    def test_numeric_when_words_enabled_then_digit_matches_word(self):
        worded = Matcher(MatcherConfig(number_words=True))
        assert worded.matches("7", "seven") is True
        assert worded.matches("twenty one", "21") is True
        assert worded.matches("8", "seven") is False

    def test_numeric_when_different_values_then_false(self, matcher):
        assert matcher.matches("17", "71") is False

    def test_numeric_when_very_long_digits_then_compared_without_error(self, matcher):
        long_seven = "0" * 5000 + "7"
        assert matcher.match_rule(long_seven, "7") is MatchRule.NUMERIC
        assert matcher.matches("9" * 5000, "9" * 4999 + "8") is False

    def test_numeric_when_long_digits_and_words_enabled_then_no_match(self):
        worded = Matcher(MatcherConfig(number_words=True))
        assert worded.matches("1" * 5000, "seven") is False
        assert worded.matches("seven", "0" * 5000 + "7") is True

    def test_numeric_when_non_ascii_digits_then_value_compared(self, matcher):
        assert matcher.matches("\u0667", "7") is True


class TestStopWordRule:
    """Tests for stop-word stripping."""

    @pytest.mark.parametrize("candidate, accepted", [("in", "on"), ("the", "a")])
    def test_stop_words_when_only_stop_words_and_lenient_then_match(self, matcher, candidate, accepted):
        assert matcher.match_rule(candidate, accepted) is MatchRule.STOP_WORDS

    @pytest.mark.parametrize("candidate, accepted", [("in", "on"), ("the", "a")])
    def test_stop_words_when_only_stop_words_and_strict_then_no_match(self, candidate, accepted):
        strict = Matcher(MatcherConfig(strictness=MatchStrictness.STRICT))
        assert strict.matches(candidate, accepted) is False

    def test_stop_words_when_strict_and_content_left_then_match(self):
        strict = Matcher(MatcherConfig(strictness=MatchStrictness.STRICT))
        assert strict.match_rule("the capital of france", "capital france") is MatchRule.STOP_WORDS

    def test_stop_words_when_one_side_only_stop_words_then_no_match(self, matcher):
        assert matcher.matches("the", "paris") is False


class TestWordSetRule:
    """Tests for multi-word containment."""

    def test_word_set_when_candidate_missing_word_then_false(self, matcher):
        assert matcher.matches("summer dry", "hot dry summer") is False

    def test_word_set_when_accepted_words_reordered_then_true(self, matcher):
        assert matcher.matches("summer hot dry", "hot dry summer") is True


class TestInjectedLexicon:
    """Tests for a substituted synonym table."""

    def test_synonym_when_custom_lexicon_then_used(self, tiny_lexicon):
        custom = Matcher(MatcherConfig(lexicon=tiny_lexicon))
        assert custom.matches("automobile", "car") is True
        assert custom.matches("huge", "big") is False

    def test_stop_words_when_custom_lexicon_then_used(self, tiny_lexicon):
        custom = Matcher(MatcherConfig(strictness=MatchStrictness.STRICT, lexicon=tiny_lexicon))
        assert custom.match_rule("the station", "station") is MatchRule.STOP_WORDS
        # "of" is only a stop word in the default lexicon
        assert custom.match_rule("station london", "station of london") is None
        assert Matcher().match_rule("station london", "station of london") is MatchRule.STOP_WORDS


class TestMatchesAny:
    """Tests for matching against several accepted answers."""

    def test_matches_any_when_one_matches_then_true(self, matcher):
        assert matcher.matches_any("large", ["small", "big"]) is True

    def test_matches_any_when_none_match_then_false(self, matcher):
        assert matcher.matches_any("medium", ["small", "big"]) is False

    def test_matches_any_when_empty_list_then_false(self, matcher):
        assert matcher.matches_any("medium", []) is False


def test_module_matches_when_default_config_then_lenient():
    assert matches("pari", "paris") is True


class TestMatcherConfig:
    """Tests for MatcherConfig validation."""

    def test_init_when_bad_strictness_then_raises_error(self):
        with pytest.raises(ValueError, match="strictness"):
            MatcherConfig(strictness="strict")
