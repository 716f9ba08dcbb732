"""
Tests for transcript normalization.
"""

import pytest

from crm_voice_parser.errors import TranscriptError
from crm_voice_parser.pipeline.normalizer import normalize


class TestSegmentation:
    """Test sentence splitting."""

    def test_splits_on_terminators(self):
        """Periods, exclamation and question marks all end a segment."""
        assert normalize("Hello there. How are you? Great!") == [
            "hello there",
            "how are you",
            "great",
        ]

    def test_runs_of_terminators_split_once(self):
        """An ellipsis does not produce empty segments."""
        assert normalize("TechStart Inc... then we talked") == [
            "techstart inc",
            "then we talked",
        ]

    def test_only_punctuation_yields_no_segments(self):
        assert normalize("...!!! ??") == []

    def test_empty_string(self):
        assert normalize("") == []

    def test_whitespace_only(self):
        assert normalize("   \n\t  ") == []

    def test_segments_are_trimmed(self):
        """No segment carries leading or trailing whitespace."""
        for segment in normalize("  One.   Two   .  Three  "):
            assert segment == segment.strip()
            assert segment


class TestCharacterStripping:
    """Test which characters survive normalization."""

    def test_lowercases(self):
        assert normalize("MET WITH JOHN") == ["met with john"]

    def test_strips_general_punctuation(self):
        assert normalize("Sarah's (CEO) notes; ok") == ["sarahs ceo notes ok"]

    def test_keeps_email_intact(self):
        """Dots inside an address do not split the segment."""
        assert normalize("Email me at Sarah@TechStart.com. Thanks") == [
            "email me at sarah@techstart.com",
            "thanks",
        ]

    def test_keeps_money_punctuation(self):
        assert normalize("Worth $75,000.") == ["worth $75,000"]

    def test_keeps_decimal(self):
        assert normalize("Priced at 12.50 per seat.") == ["priced at 12.50 per seat"]

    def test_keeps_slash_dates(self):
        assert normalize("Follow up on 3/15.") == ["follow up on 3/15"]

    def test_strips_commas_between_words(self):
        assert normalize("analytics, integration") == ["analytics integration"]

    def test_strips_lone_dollar_sign(self):
        assert normalize("$$$ cash") == ["cash"]

    def test_keeps_hyphens(self):
        assert normalize("Schedule a follow-up.") == ["schedule a follow-up"]


class TestInvalidInput:
    """Test non-string input."""

    @pytest.mark.parametrize("value", [None, 42, ["a transcript"]])
    def test_non_string_raises(self, value):
        with pytest.raises(TranscriptError) as exc_info:
            normalize(value)

        assert exc_info.value.message == "Transcript must be a string"
        assert exc_info.value.context["type"] == type(value).__name__
