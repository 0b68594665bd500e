"""
Unit tests for tools/matcher.py — Exact and substring matching.

Uses the sample lexicon from conftest; no registry involved.
"""

from models.tiers import Tier
from tools import matcher


class TestExactMode:

    def test_token_hit(self, sample_lexicon, gate):
        assert matcher.is_profane("that darn dog", sample_lexicon, gate) is True

    def test_no_hit(self, sample_lexicon, gate):
        assert matcher.is_profane("a lovely day", sample_lexicon, gate) is False

    def test_case_and_leetspeak_normalized(self, sample_lexicon, gate):
        assert matcher.is_profane("oh SH!T", sample_lexicon, gate) is True
        assert matcher.is_profane("B00B5 ahoy", sample_lexicon, gate) is True

    def test_substring_is_not_exact_hit(self, sample_lexicon, gate):
        assert matcher.is_profane("bullshit", sample_lexicon, gate) is False
        assert matcher.is_profane("classic", sample_lexicon, gate) is False

    def test_punctuation_prevents_token_match(self, sample_lexicon, gate):
        assert matcher.is_profane("darn,", sample_lexicon, gate) is False

    def test_disabled_tier(self, sample_lexicon, gate):
        gate.disable(Tier.POSSIBLY_OFFENSIVE)
        assert matcher.is_profane("that darn dog", sample_lexicon, gate) is False
        assert "darn" in sample_lexicon

    def test_empty_and_whitespace(self, sample_lexicon, gate):
        assert matcher.is_profane("", sample_lexicon, gate) is False
        assert matcher.is_profane("   ", sample_lexicon, gate) is False

    def test_profane_words_lists_hits_in_order(self, sample_lexicon, gate):
        assert matcher.profane_words("darn it, Sh!t and darn", sample_lexicon, gate) == [
            "darn", "shit", "darn",
        ]

    def test_is_profane_token(self, sample_lexicon, gate):
        assert matcher.is_profane_token("fuck", sample_lexicon, gate)
        assert not matcher.is_profane_token("Fuck", sample_lexicon, gate)
        assert not matcher.is_profane_token("duck", sample_lexicon, gate)


class TestSubstringMode:

    def test_substring_hit(self, sample_lexicon, gate):
        assert matcher.is_profane_ish("bullshit artist", sample_lexicon, gate) is True

    def test_leetspeak_substring(self, sample_lexicon, gate):
        assert matcher.is_profane_ish("what the fvck, 5h!tty", sample_lexicon, gate) is True

    def test_no_hit(self, sample_lexicon, gate):
        assert matcher.is_profane_ish("a lovely day", sample_lexicon, gate) is False

    def test_scunthorpe_style_false_positive_is_expected(self, sample_lexicon, gate):
        assert matcher.is_profane_ish("classic", sample_lexicon, gate) is True

    def test_disabled_tier_skipped_but_others_hit(self, sample_lexicon, gate):
        gate.disable(Tier.POSSIBLY_OFFENSIVE)
        assert matcher.is_profane_ish("classic", sample_lexicon, gate) is False
        assert matcher.is_profane_ish("classic shitshow", sample_lexicon, gate) is True

    def test_matches_pairs_in_lexicon_order(self, sample_lexicon, gate):
        assert matcher.profane_ish_matches("fuckshit", sample_lexicon, gate) == [
            ("shit", Tier.COMMON_PROFANITY),
            ("fuck", Tier.COMMON_PROFANITY),
        ]

    def test_profane_ish_words_one_copy_per_key(self, sample_lexicon, gate):
        assert matcher.profane_ish_words("shitfuck", "Sh!tFuck", sample_lexicon, gate) == [
            "Sh!tFuck", "Sh!tFuck",
        ]

    def test_profane_ish_words_normalizes_phrase(self, sample_lexicon, gate):
        assert matcher.profane_ish_words("Sh1t", "Sh1t", sample_lexicon, gate) == ["Sh1t"]

    def test_profane_ish_words_no_hit(self, sample_lexicon, gate):
        assert matcher.profane_ish_words("happens", "happens", sample_lexicon, gate) == []

    def test_profane_ish_words_respects_gate(self, sample_lexicon, gate):
        gate.disable(Tier.COMMON_PROFANITY)
        assert matcher.profane_ish_words("shitfuck", "x", sample_lexicon, gate) == []

    def test_empty_phrase(self, sample_lexicon, gate):
        assert matcher.is_profane_ish("", sample_lexicon, gate) is False
