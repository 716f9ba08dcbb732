"""
End-to-end tests for the voice note parser.

Covers the representative sales notes, structural guarantees that hold for
every input (valid result, bounded confidence, non-empty lists) and error
containment.
"""

import pytest

from crm_voice_parser import parse
from crm_voice_parser.config import config
from crm_voice_parser.errors import ExtractionError
from crm_voice_parser.models.records import NO_NEXT_STEPS, UNKNOWN_COMPANY, UNKNOWN_CUSTOMER
from crm_voice_parser.pipeline.flags import (
    COMPANY_NAME_MISSING,
    CONTACT_INFO_MISSING,
    CUSTOMER_NAME_MISSING,
    KEY_POINTS_MISSING,
    NEEDS_VERIFICATION,
    NEXT_STEPS_MISSING,
)
from crm_voice_parser.pipeline import parser as parser_module
from crm_voice_parser.pipeline.parser import PARSE_FAILED, VoiceNoteParser

ADVERSARIAL_INPUTS = [
    "",
    "!!!",
    "$$$ @@@ ###",
    "\n\n\t",
    "1/2/3/4/5",
    "a" * 10_000,
    "Café naïve résumé ☕.",
    "....... ,,,,, ??? !!!",
    "email is @@. phone is 555.",
    "Met with. From. At. With with with.",
]


class TestSampleNotes:
    """Test the representative sales notes end to end."""

    def test_initial_sales_call(self, parser, initial_sales_call):
        outcome = parser.parse(initial_sales_call)

        assert outcome.success
        result = outcome.result
        assert result.interaction.type == "call"
        assert result.customer.name == "Sarah Johnson"
        assert result.customer.company == "Techstart Inc"
        assert result.interaction.follow_up_date == "tuesday"
        assert result.deal.value == "75,000"
        assert result.deal.stage == "qualification"
        assert result.deal.name == "Deal - Oct 2026"
        assert result.flags == (CONTACT_INFO_MISSING, NEEDS_VERIFICATION)
        assert result.confidence == 0.8
        assert result.confidence > parser.confidence_threshold

    def test_product_demo(self, parser, product_demo):
        result = parser.parse(product_demo).unwrap()

        assert result.interaction.type == "demo"
        assert result.customer.name == "Michael Chen"
        assert result.customer.company == "Global Logistics"
        assert result.deal.value == "120,000"
        assert result.deal.stage == "qualification"

    def test_deal_closing(self, parser, deal_closing):
        result = parser.parse(deal_closing).unwrap()

        assert result.interaction.type == "other"
        assert result.customer.name == "Emily Rodriguez"
        assert result.customer.company == "Innovative Solutions"
        assert result.deal.stage == "closed_won"
        assert result.deal.value == "45,000"

    def test_minimal_information(self, parser, minimal_information):
        result = parser.parse(minimal_information).unwrap()

        assert result.customer.name == "John"
        assert result.customer.company == "Acme"
        assert result.interaction.type == "meeting"
        assert result.interaction.key_points == ("Pricing",)
        assert result.interaction.next_steps == (NO_NEXT_STEPS,)
        assert result.deal is None
        assert NEXT_STEPS_MISSING in result.flags
        assert result.confidence == 0.7

    def test_filler_only_note(self, parser):
        """Nothing extractable: sentinels, placeholders, low confidence."""
        result = parser.parse("Um, uh... the and so. Well, yeah!").unwrap()

        assert result.customer.name == UNKNOWN_CUSTOMER
        assert result.customer.company == UNKNOWN_COMPANY
        assert result.interaction.type == "other"
        assert result.deal is None
        assert result.flags == (
            CUSTOMER_NAME_MISSING,
            COMPANY_NAME_MISSING,
            CONTACT_INFO_MISSING,
            KEY_POINTS_MISSING,
            NEXT_STEPS_MISSING,
        )
        assert result.confidence == pytest.approx(0.1)

    def test_invalid_email_left_empty(self, parser):
        result = parser.parse("Contact me at not-an-email.").unwrap()

        assert result.customer.email == ""
        assert CONTACT_INFO_MISSING in result.flags

    def test_wire_format(self, parser, initial_sales_call):
        payload = parser.parse(initial_sales_call).unwrap().to_dict()

        assert set(payload) == {"customer", "interaction", "deal", "confidence", "flags"}
        assert payload["interaction"]["followUpDate"] == "tuesday"
        assert "closeDate" not in payload["deal"]


class TestGuarantees:
    """Test properties that hold for every input string."""

    @pytest.mark.parametrize("transcript", ADVERSARIAL_INPUTS)
    def test_every_string_parses(self, parser, transcript):
        outcome = parser.parse(transcript)

        assert outcome.success
        result = outcome.result
        assert 0.0 <= result.confidence <= 1.0
        assert result.customer.name
        assert result.customer.company
        assert result.interaction.key_points
        assert result.interaction.next_steps
        assert len(result.flags) == len(set(result.flags))

    def test_empty_transcript(self, parser):
        result = parser.parse("").unwrap()

        assert result.interaction.summary == "."
        assert result.deal is None

    def test_deterministic(self, parser, initial_sales_call):
        first = parser.parse(initial_sales_call).unwrap()
        second = parser.parse(initial_sales_call).unwrap()

        assert first.to_dict() == second.to_dict()

    def test_deal_present_only_with_a_signal(self, parser):
        assert parser.parse("This is a new lead.").unwrap().deal is None
        assert parser.parse("This is a new lead worth $5,000.").unwrap().deal is not None
        assert parser.parse("They signed today.").unwrap().deal is not None

    def test_more_information_never_lowers_confidence(self, parser):
        base = (
            "Call with Sarah Johnson from TechStart Inc. She is interested in analytics. "
            "We will send a proposal."
        )
        richer = base + " Her email is sarah@techstart.com and phone is 555-123-4567."

        assert parser.parse(richer).unwrap().confidence >= parser.parse(base).unwrap().confidence

    def test_module_level_parse(self, minimal_information):
        assert parse(minimal_information).success


class TestErrorContainment:
    """Test that failures come back as values."""

    @pytest.mark.parametrize("value", [None, 42, b"bytes"])
    def test_non_string_input(self, parser, value):
        outcome = parser.parse(value)

        assert not outcome.success
        assert outcome.errors == ["Transcript must be a string"]

    def test_unexpected_stage_error(self, parser, monkeypatch, minimal_information):
        def explode(segments):
            raise RuntimeError("boom")

        monkeypatch.setattr(parser.deal_extractor, "extract", explode)

        outcome = parser.parse(minimal_information)

        assert not outcome.success
        assert outcome.errors == [PARSE_FAILED]

    def test_schema_violation_becomes_failure(self, parser, monkeypatch, minimal_information):
        """A record that fails validation is discarded whole."""
        def bad_confidence(customer, interaction, flags):
            return 1.5

        monkeypatch.setattr(parser_module, "calculate_confidence", bad_confidence)

        outcome = parser.parse(minimal_information)

        assert not outcome.success
        assert len(outcome.errors) == 1
        assert outcome.errors[0].startswith("confidence:")


class TestExtract:
    """Test the unvalidated extraction entry point."""

    def test_returns_camel_case_record(self, parser, initial_sales_call):
        record = parser.extract(initial_sales_call)

        assert record["interaction"]["keyPoints"]
        assert record["deal"]["stage"] == "qualification"

    def test_stage_errors_are_wrapped(self, parser, monkeypatch):
        def explode(segments):
            raise ValueError("bad segment")

        monkeypatch.setattr(parser.customer_extractor, "extract", explode)

        with pytest.raises(ExtractionError) as exc_info:
            parser.extract("Met with John.")

        assert exc_info.value.stage == "customer"
        assert exc_info.value.context["error_type"] == "ValueError"

    def test_threshold_defaults_from_config(self):
        assert VoiceNoteParser().confidence_threshold == config.CONFIDENCE_THRESHOLD
        assert VoiceNoteParser(confidence_threshold=0.5).confidence_threshold == 0.5
