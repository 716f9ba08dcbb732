"""
Deal extraction: stage, monetary value, close date and description.

A deal only exists when the transcript carries a deal signal: a monetary
value, or a stage keyword beyond the default "prospecting". Otherwise the
parse result omits the deal entirely.

The deal name is synthesised from the parse time ("Deal - Oct 2026"), never
from a date mentioned in the transcript. The clock is injectable so tests can
pin it.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Any

import structlog

from ..models.records import DealStage
from .matching import MONTH_DAY, SLASH_DATE, first_group, phrase_pattern

logger = structlog.get_logger(__name__)

# Checked in this order per segment; the first stage whose keywords match is
# the segment's stage. Only a non-prospecting stage moves the deal, once.
STAGE_KEYWORDS: dict[DealStage, re.Pattern[str]] = {
    DealStage.PROSPECTING: phrase_pattern(['prospecting', 'new', 'initial', 'first contact']),
    DealStage.QUALIFICATION: phrase_pattern(['qualified', 'interested', 'potential', 'opportunity']),
    DealStage.PROPOSAL: phrase_pattern(['proposal', 'quote', 'sent proposal', 'pricing proposal']),
    DealStage.NEGOTIATION: phrase_pattern(
        ['negotiating', 'negotiation', 'terms', 'contract', 'finalizing']
    ),
    DealStage.CLOSED_WON: phrase_pattern(['won', 'closed', 'signed', 'deal closed']),
    DealStage.CLOSED_LOST: phrase_pattern(['lost', 'declined', 'not interested', 'passed']),
}

_AMOUNT = r'(\d+(?:,\d{3})*(?:\.\d+)?)'

VALUE_PATTERNS: list[re.Pattern[str]] = [
    # "$75,000"
    re.compile(r'\$' + _AMOUNT),
    # "worth 120,000", "budget is around 50000"
    re.compile(
        r'\b(?:worth|value|valued|price|priced|cost|costs|budget)\s+'
        r'(?:(?:is|of|at|around|about|roughly|approximately)\s+)*\$?' + _AMOUNT + r'\b'
    ),
    # "45000 dollars", "10,000 usd"
    re.compile(r'\b' + _AMOUNT + r'\s*(?:dollars|usd)\b'),
]

_CLOSE_TRIGGER = r'\b(?:close|closes|closing|expected|deadline)\s+(?:(?:by|on|date|is|in)\s+)*'

CLOSE_DATE_PATTERNS: list[re.Pattern[str]] = [
    re.compile(_CLOSE_TRIGGER + MONTH_DAY),
    re.compile(_CLOSE_TRIGGER + SLASH_DATE),
]

# Segments mentioning follow-ups are actions, not deal description
_NOT_DESCRIPTION = ('next step', 'follow up')
MIN_DESCRIPTION_SEGMENT = 10
DESCRIPTION_SEGMENTS = 5

_MONTH_ABBR = ('Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun', 'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec')


def utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


def deal_name(now: datetime) -> str:
    """Synthesise a deal name like "Deal - Oct 2026" (locale independent)."""
    return f'Deal - {_MONTH_ABBR[now.month - 1]} {now.year}'


@dataclass(frozen=True)
class DealExtraction:
    """Deal signals recovered from a transcript."""

    stage: DealStage = DealStage.PROSPECTING
    value: str = ''
    close_date: str | None = None
    description: str = ''
    name: str = ''

    @property
    def exists(self) -> bool:
        """A deal is materialised only for a value or an advanced stage."""
        return bool(self.value) or self.stage != DealStage.PROSPECTING

    def to_dict(self) -> dict[str, Any] | None:
        """Wire-format payload (validated later as a DealRecord), or None when absent."""
        if not self.exists:
            return None
        return {
            'name': self.name,
            'value': self.value,
            'stage': self.stage.value,
            'closeDate': self.close_date,
            'description': self.description,
        }


class DealExtractor:
    """
    Detects whether the voice note describes a deal, and its details.

    Args:
        clock: Returns the current time; used only for the deal name
    """

    def __init__(self, clock: Callable[[], datetime] | None = None):
        self.clock = clock or utc_now

    def extract(self, segments: list[str]) -> DealExtraction:
        """
        Extract deal signals from normalized segments.

        Args:
            segments: Normalized transcript segments

        Returns:
            DealExtraction; check .exists before materialising a DealRecord
        """
        stage = self._classify_stage(segments)
        value = self._first_across(VALUE_PATTERNS, segments) or ''
        close_date = self._first_across(CLOSE_DATE_PATTERNS, segments)

        candidates = [
            segment
            for segment in segments
            if len(segment) > MIN_DESCRIPTION_SEGMENT
            and not any(phrase in segment for phrase in _NOT_DESCRIPTION)
        ]

        deal = DealExtraction(
            stage=stage,
            value=value,
            close_date=close_date,
            description='. '.join(candidates[:DESCRIPTION_SEGMENTS]),
        )

        if not deal.exists:
            logger.debug('deal_extraction.no_deal')
            return deal

        deal = replace(deal, name=deal_name(self.clock()))
        logger.debug(
            'deal_extraction.complete',
            stage=deal.stage.value,
            value=deal.value,
            close_date=deal.close_date,
        )
        return deal

    def _classify_stage(self, segments: list[str]) -> DealStage:
        for segment in segments:
            for stage, keywords in STAGE_KEYWORDS.items():
                if keywords.search(segment):
                    if stage != DealStage.PROSPECTING:
                        return stage
                    break
        return DealStage.PROSPECTING

    @staticmethod
    def _first_across(patterns: list[re.Pattern[str]], segments: list[str]) -> str | None:
        for segment in segments:
            match = first_group(patterns, segment)
            if match:
                return match
        return None
