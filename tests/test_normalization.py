"""
Tests for MatchPolicy answer matching.
Run: python -m pytest tests/test_normalization.py -v
"""

import pytest

from flashdrill.normalization import MatchPolicy, collapse_whitespace, remove_nonalphabetic
from flashdrill.config import DEFAULT_POLICY, STRICT_POLICY


class TestDefaultPolicy:

    def test_accents_and_case_are_ignored(self):
        assert DEFAULT_POLICY.matches("café", "CAFE")

    def test_whitespace_is_normalized(self):
        assert DEFAULT_POLICY.matches("hello world", "  hello   world  ")

    def test_nonalphabetic_characters_are_dropped(self):
        assert DEFAULT_POLICY.matches("don't", "dont")

    def test_different_words_do_not_match(self):
        assert not DEFAULT_POLICY.matches("cat", "dog")

    def test_transliterates_beyond_combining_marks(self):
        assert DEFAULT_POLICY.matches("Straße", "strasse")

    def test_punctuation_only_answers_match_each_other(self):
        assert DEFAULT_POLICY.normalize("?!") == ""
        assert DEFAULT_POLICY.matches("?!", "...")

    @pytest.mark.parametrize("a, b", [
        ("café", "CAFE"),
        ("cat", "dog"),
        ("  Ça va?  ", "ca va"),
        ("don't", "do not"),
    ])
    def test_matching_is_symmetric(self, a, b):
        assert DEFAULT_POLICY.matches(a, b) == DEFAULT_POLICY.matches(b, a)

    @pytest.mark.parametrize("text", [
        "  Ça  va,\tÜnïcödé!  ",
        "hello world",
        "Ελληνικά",
        "",
    ])
    def test_normalize_is_idempotent_for_cased_scripts(self, text):
        once = DEFAULT_POLICY.normalize(text)
        assert DEFAULT_POLICY.normalize(once) == once

    def test_caseless_scripts_transliterate_after_lowercasing(self):
        once = DEFAULT_POLICY.normalize("北京")
        assert once == "BeiJing"
        assert DEFAULT_POLICY.normalize(once) == "beijing"
        assert DEFAULT_POLICY.matches("北京", "北京")
        assert not DEFAULT_POLICY.matches("北京", "beijing")


class TestPolicyToggles:

    def test_strict_policy_only_trims(self):
        assert STRICT_POLICY.matches(" cafe ", "cafe")
        assert not STRICT_POLICY.matches("café", "cafe")
        assert not STRICT_POLICY.matches("Cafe", "cafe")
        assert not STRICT_POLICY.matches("a  b", "a b")

    def test_whitespace_kept_when_alphabetic_filter_off(self):
        policy = MatchPolicy(ignore_nonalphabetic=False)
        assert policy.normalize("  Hello   World ") == "hello world"
        assert not policy.matches("don't", "dont")

    def test_accents_kept_when_disabled(self):
        policy = MatchPolicy(ignore_accents=False)
        assert policy.normalize("Café!") == "café"

    def test_helpers(self):
        assert collapse_whitespace(" a \n b\t c ") == "a b c"
        assert remove_nonalphabetic("r2-d2 é") == "rdé"


class TestSimilarity:

    def test_identical_answers_score_one(self):
        assert DEFAULT_POLICY.similarity("Hello", "hello!") == 1.0

    def test_typo_scores_high(self):
        assert DEFAULT_POLICY.similarity("hello world", "helo world") > 0.8

    def test_unrelated_scores_low(self):
        assert DEFAULT_POLICY.similarity("cat", "xyz") == 0.0


class TestPolicySerialization:

    def test_from_dict(self):
        policy = MatchPolicy.from_dict({'ignore_case': False})
        assert policy.ignore_case is False
        assert policy.trim_whitespace is True
        assert MatchPolicy.from_dict(policy.to_dict()) == policy

    def test_unknown_option_is_rejected(self):
        with pytest.raises(ValueError):
            MatchPolicy.from_dict({'ignore_spelling': True})

    def test_string_toggle_is_rejected(self):
        with pytest.raises(ValueError):
            MatchPolicy.from_dict({'ignore_case': 'false'})

    def test_numeric_toggle_is_rejected(self):
        with pytest.raises(ValueError):
            MatchPolicy.from_dict({'ignore_case': 0})

    def test_non_mapping_is_rejected(self):
        with pytest.raises(ValueError):
            MatchPolicy.from_dict(['ignore_case'])
