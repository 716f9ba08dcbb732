"""
Interaction extraction: type, summary, key points, next steps, follow-up date.

Key points and next steps are harvested from segments containing indicator
phrases; the indicator phrases themselves are removed and the remainder kept.
When nothing is found a single placeholder sentence is emitted instead, so
downstream consumers can rely on non-empty lists. The pre-placeholder state
is kept (key_points_found / next_steps_found) for flagging and scoring.
"""

import re
from dataclasses import dataclass
from typing import Any

import structlog

from ..models.records import NO_KEY_POINTS, NO_NEXT_STEPS, InteractionType
from .matching import (
    MONTH_DAY,
    SLASH_DATE,
    WEEKDAYS,
    capitalize_first,
    collapse_whitespace,
    first_group,
    phrase_pattern,
)

logger = structlog.get_logger(__name__)

# Checked in this order; the first segment matching any type decides.
INTERACTION_KEYWORDS: dict[InteractionType, re.Pattern[str]] = {
    InteractionType.MEETING: phrase_pattern(
        ['met', 'meeting', 'visited', 'sat down', 'in person', 'discussed in person']
    ),
    InteractionType.CALL: phrase_pattern(
        ['call', 'called', 'phone call', 'spoke', 'conversation', 'talked']
    ),
    InteractionType.DEMO: phrase_pattern(
        ['demo', 'demonstration', 'showed', 'presentation', 'walkthrough']
    ),
    InteractionType.EMAIL: phrase_pattern(['emailed', 'email', 'message', 'sent']),
}

KEY_POINT_INDICATORS = phrase_pattern([
    'they mentioned',
    'key point',
    'key points',
    'important',
    'noted',
    'discussed',
    'highlighted',
    'brought up',
    'interested in',
    'concerned about',
])

NEXT_STEP_INDICATORS = phrase_pattern([
    'next step',
    'next steps',
    'follow up',
    'will',
    'need to',
    'schedule',
    'send',
    'prepare',
    'action item',
    'action items',
    'to do',
])

_FOLLOW_UP_TRIGGER = r'\b(?:follow[\s-]*up|next|schedule[sd]?)\s+(?:(?:on|in|at|for)\s+)?'

FOLLOW_UP_DATE_PATTERNS: list[re.Pattern[str]] = [
    re.compile(_FOLLOW_UP_TRIGGER + MONTH_DAY),
    re.compile(_FOLLOW_UP_TRIGGER + SLASH_DATE),
    re.compile(_FOLLOW_UP_TRIGGER + rf'({WEEKDAYS})\b'),
]

# Residual text must be longer than this to count as a point/step
MIN_ITEM_LENGTH = 5
SUMMARY_SEGMENTS = 3


@dataclass(frozen=True)
class InteractionExtraction:
    """Interaction fields recovered from a transcript, placeholders applied."""

    type: InteractionType
    summary: str
    key_points: tuple[str, ...]
    next_steps: tuple[str, ...]
    follow_up_date: str | None = None
    key_points_found: bool = False
    next_steps_found: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Wire-format payload, validated later as an InteractionRecord."""
        return {
            'type': self.type.value,
            'summary': self.summary,
            'keyPoints': list(self.key_points),
            'nextSteps': list(self.next_steps),
            'followUpDate': self.follow_up_date,
        }


def _harvest(segment: str, indicators: re.Pattern[str]) -> str | None:
    """Strip every indicator phrase from a segment; keep the rest if long enough."""
    if not indicators.search(segment):
        return None
    residual = collapse_whitespace(indicators.sub('', segment))
    if len(residual) > MIN_ITEM_LENGTH:
        return capitalize_first(residual)
    return None


class InteractionExtractor:
    """Classifies the interaction and harvests its discussion content."""

    def extract(self, segments: list[str]) -> InteractionExtraction:
        """
        Extract interaction details from normalized segments.

        Args:
            segments: Normalized transcript segments

        Returns:
            InteractionExtraction with non-empty key_points / next_steps
        """
        key_points: list[str] = []
        next_steps: list[str] = []

        for segment in segments:
            point = _harvest(segment, KEY_POINT_INDICATORS)
            if point:
                key_points.append(point)
            step = _harvest(segment, NEXT_STEP_INDICATORS)
            if step:
                next_steps.append(step)

        interaction = InteractionExtraction(
            type=self._classify(segments),
            summary='. '.join(segments[:SUMMARY_SEGMENTS]) + '.',
            key_points=tuple(key_points) or (NO_KEY_POINTS,),
            next_steps=tuple(next_steps) or (NO_NEXT_STEPS,),
            follow_up_date=self._find_follow_up_date(segments),
            key_points_found=bool(key_points),
            next_steps_found=bool(next_steps),
        )

        logger.debug(
            'interaction_extraction.complete',
            type=interaction.type.value,
            key_points=len(key_points),
            next_steps=len(next_steps),
            follow_up_date=interaction.follow_up_date,
        )
        return interaction

    def _classify(self, segments: list[str]) -> InteractionType:
        for segment in segments:
            for interaction_type, keywords in INTERACTION_KEYWORDS.items():
                if keywords.search(segment):
                    return interaction_type
        return InteractionType.OTHER

    def _find_follow_up_date(self, segments: list[str]) -> str | None:
        for segment in segments:
            date = first_group(FOLLOW_UP_DATE_PATTERNS, segment)
            if date:
                return date
        return None
