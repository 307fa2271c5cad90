"""
Unit tests for keyword gap analysis.
"""

from grading_toolkit.text.keywords import extract_key_phrases, missing_keywords, rank_terms


class TestMissingKeywords:
    """Tests for missing_keywords()."""

    def test_missing_when_student_uses_some_words_then_returns_rest(self):
        """Model content words the student used are excluded."""
        result = missing_keywords("chlorophyll absorbs light energy", "light is absorbed", 6)
        assert result == ["chlorophyll", "absorbs", "energy"]

    def test_missing_when_repeated_terms_then_ordered_by_frequency(self):
        """More frequent model terms come first."""
        model = "enzyme substrate enzyme active enzyme substrate"
        assert missing_keywords(model, "", 6) == ["enzyme", "substrate", "active"]

    def test_missing_when_equal_frequency_then_first_seen_order(self):
        """Ties keep discovery order, not alphabetical order."""
        assert missing_keywords("zebra apple mango", "", 6) == ["zebra", "apple", "mango"]

    def test_missing_when_limit_then_truncates(self):
        assert missing_keywords("zebra apple mango", "", 2) == ["zebra", "apple"]

    def test_missing_when_short_words_then_ignored(self):
        """Words under five letters are not treated as keywords."""
        assert missing_keywords("cell wall made of cellulose", "", 6) == ["cellulose"]

    def test_missing_when_student_covers_everything_then_empty(self):
        model = "glucose oxygen"
        assert missing_keywords(model, "Oxygen and GLUCOSE!", 6) == []

    def test_missing_when_model_empty_then_empty(self):
        assert missing_keywords("", "anything at all", 6) == []


class TestExtractKeyPhrases:
    """Tests for extract_key_phrases()."""

    def test_key_phrases_when_model_text_then_frequent_content_words(self):
        result = extract_key_phrases("Osmosis: osmosis moves water through a membrane", 6)
        assert result == ["osmosis", "moves", "water", "through", "membrane"]

    def test_key_phrases_when_limit_then_truncates(self):
        assert extract_key_phrases("alpha gamma delta", 1) == ["alpha"]

    def test_key_phrases_when_no_long_words_then_empty(self):
        assert extract_key_phrases("it is a cat", 6) == []


class TestRankTerms:
    """Tests for rank_terms()."""

    def test_rank_when_counts_differ_then_most_frequent_first(self):
        assert rank_terms(["b", "a", "b", "c", "a", "b"], 2) == ["b", "a"]

    def test_rank_when_ties_then_first_seen_order(self):
        assert rank_terms(["x", "y", "z"], 10) == ["x", "y", "z"]

    def test_rank_when_limit_zero_then_empty(self):
        assert rank_terms(["x"], 0) == []
