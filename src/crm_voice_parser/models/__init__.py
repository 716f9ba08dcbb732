"""
Data models for the CRM voice note parser.

Provides the CRM records (customer, interaction, deal), the aggregated
ParsedResult with its ParseSuccess / ParseFailure outcome, and the
VoiceNoteInput accepted at the HTTP boundary.
"""

from .input import VoiceNoteInput
from .records import (
    NO_KEY_POINTS,
    NO_NEXT_STEPS,
    UNKNOWN_COMPANY,
    UNKNOWN_CUSTOMER,
    CustomerRecord,
    DealRecord,
    DealStage,
    InteractionRecord,
    InteractionType,
    is_valid_email,
)
from .result import ParsedResult, ParseFailure, ParseOutcome, ParseSuccess

__all__ = [
    # Enums
    'InteractionType',
    'DealStage',
    # Sentinels
    'UNKNOWN_CUSTOMER',
    'UNKNOWN_COMPANY',
    'NO_KEY_POINTS',
    'NO_NEXT_STEPS',
    # Records
    'CustomerRecord',
    'InteractionRecord',
    'DealRecord',
    'is_valid_email',
    # Results
    'ParsedResult',
    'ParseSuccess',
    'ParseFailure',
    'ParseOutcome',
    # Input
    'VoiceNoteInput',
]
