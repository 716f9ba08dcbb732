"""
Voice note parsing pipeline: normalization, rule-based extraction, flagging,
confidence scoring and schema validation.
"""

from .customer import CustomerExtraction, CustomerExtractor
from .deal import DealExtraction, DealExtractor
from .flags import identify_flags
from .interaction import InteractionExtraction, InteractionExtractor
from .normalizer import normalize
from .parser import VoiceNoteParser, parse, voice_note_parser
from .scoring import calculate_confidence
from .validator import validate_record

__all__ = [
    # Orchestrator
    'VoiceNoteParser',
    'voice_note_parser',
    'parse',
    # Stages
    'normalize',
    'CustomerExtractor',
    'CustomerExtraction',
    'InteractionExtractor',
    'InteractionExtraction',
    'DealExtractor',
    'DealExtraction',
    'identify_flags',
    'calculate_confidence',
    'validate_record',
]
