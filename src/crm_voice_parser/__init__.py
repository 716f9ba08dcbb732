"""
CRM Voice Note Parser

Rule-based extraction of customer, interaction and deal data from
transcribed sales voice notes, with data-quality flags, a confidence score
and schema validation of the assembled record.
"""

__version__ = '0.1.0'

from .pipeline import (
    VoiceNoteParser,
    parse,
    voice_note_parser,
)
from .models import (
    CustomerRecord,
    DealRecord,
    DealStage,
    InteractionRecord,
    InteractionType,
    ParsedResult,
    ParseFailure,
    ParseOutcome,
    ParseSuccess,
    VoiceNoteInput,
)
from .logging import (
    configure_logging,
    new_trace_id,
    logging_context,
    PipelineTimer,
)
from .errors import (
    VoiceParserError,
    PipelineError,
    TranscriptError,
    ExtractionError,
    SchemaValidationError,
)

__all__ = [
    # Version
    '__version__',
    # Parser
    'VoiceNoteParser',
    'voice_note_parser',
    'parse',
    # Models
    'CustomerRecord',
    'InteractionRecord',
    'DealRecord',
    'InteractionType',
    'DealStage',
    'ParsedResult',
    'ParseSuccess',
    'ParseFailure',
    'ParseOutcome',
    'VoiceNoteInput',
    # Logging
    'configure_logging',
    'new_trace_id',
    'logging_context',
    'PipelineTimer',
    # Errors
    'VoiceParserError',
    'PipelineError',
    'TranscriptError',
    'ExtractionError',
    'SchemaValidationError',
]
