"""
Pytest configuration and shared fixtures.

Key fixtures:
- fixed_now / parser: a parser whose clock is pinned, so deal names are stable
- initial_sales_call, product_demo, deal_closing, minimal_information:
  representative sales voice notes
"""

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add src to path for imports
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from crm_voice_parser.pipeline.normalizer import normalize  # noqa: E402
from crm_voice_parser.pipeline.parser import VoiceNoteParser  # noqa: E402

FIXED_NOW = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_now() -> datetime:
    """Pinned parse time; deal names come out as "Deal - Oct 2026"."""
    return FIXED_NOW


@pytest.fixture
def parser(fixed_now) -> VoiceNoteParser:
    """Parser with a pinned clock and the default review threshold."""
    return VoiceNoteParser(clock=lambda: fixed_now)


@pytest.fixture
def initial_sales_call() -> str:
    return (
        "I had a call with Sarah Johnson from TechStart Inc. She's interested in our "
        "enterprise solution. We discussed their current pain points with data management "
        "and how our product could help. Key points include their need for better "
        "analytics, integration with their existing CRM, and scalability for their growing "
        "team. Next steps are to send a product demo link and schedule a follow-up meeting "
        "next Tuesday. The potential deal value is around $75,000."
    )


@pytest.fixture
def product_demo() -> str:
    return (
        "Just finished a demo with Michael Chen from Global Logistics. I showed them our "
        "warehouse management features and real-time tracking capabilities. They seemed "
        "particularly interested in the automated reporting and the mobile app. We need to "
        "prepare a custom quote for their 5 warehouses and get pricing approval from their "
        "finance team. Follow up in two weeks. This deal is worth about $120,000."
    )


@pytest.fixture
def deal_closing() -> str:
    return (
        "Great news! I just closed the deal with Emily Rodriguez at Innovative Solutions. "
        "We signed the contract for their annual subscription. The final value is $45,000 "
        "with a 20% discount applied. They'll start onboarding next Monday."
    )


@pytest.fixture
def minimal_information() -> str:
    return "Met with John from Acme. Discussed pricing."


@pytest.fixture
def segments_of():
    """Shortcut: normalize a transcript inside a test."""
    return normalize
