"""
Voice note parser orchestrator.

Wires the pipeline stages (normalize, customer, interaction, deal, flags,
confidence, validate) into a single parse() call that takes a transcript and
returns a ParseOutcome.

parse() is total over strings: soft gaps degrade the confidence score and
raise flags, structural violations become a ParseFailure, and unexpected
errors are logged and reported as a generic ParseFailure. The parser holds no
mutable state, so one instance can serve concurrent callers.
"""

from collections.abc import Callable
from datetime import datetime
from typing import Any, TypeVar

import structlog

from ..config import config
from ..errors import TranscriptError, wrap_stage_error
from ..logging import PipelineTimer
from ..models.result import ParseFailure, ParseOutcome
from .customer import CustomerExtraction, CustomerExtractor
from .deal import DealExtraction, DealExtractor
from .flags import identify_flags
from .interaction import InteractionExtraction, InteractionExtractor
from .normalizer import normalize
from .scoring import calculate_confidence
from .validator import validate_record

logger = structlog.get_logger(__name__)

PARSE_FAILED = 'Failed to parse voice note'

T = TypeVar('T')


def assemble_record(
    customer: CustomerExtraction,
    interaction: InteractionExtraction,
    deal: DealExtraction,
    confidence: float,
    flags: list[str],
) -> dict[str, Any]:
    """Build the unvalidated wire-format record from the stage outputs."""
    return {
        'customer': customer.to_dict(),
        'interaction': interaction.to_dict(),
        'deal': deal.to_dict(),
        'confidence': confidence,
        'flags': list(flags),
    }


class VoiceNoteParser:
    """
    Converts a transcribed voice note into structured CRM data.

    Args:
        confidence_threshold: Review threshold; logged but never enforced
            (defaults to config.CONFIDENCE_THRESHOLD)
        clock: Time source for the synthesised deal name
    """

    def __init__(
        self,
        confidence_threshold: float | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        if confidence_threshold is None:
            confidence_threshold = config.CONFIDENCE_THRESHOLD
        self.confidence_threshold = confidence_threshold
        self.customer_extractor = CustomerExtractor()
        self.interaction_extractor = InteractionExtractor()
        self.deal_extractor = DealExtractor(clock=clock)

    def parse(self, transcript: str) -> ParseOutcome:
        """
        Parse a transcript into a validated result.

        Args:
            transcript: Transcribed voice note (non-emptiness is the caller's job)

        Returns:
            ParseSuccess wrapping a ParsedResult, or ParseFailure with errors
        """
        timer = PipelineTimer()
        log = logger.bind(
            transcript_chars=len(transcript) if isinstance(transcript, str) else None,
        )

        try:
            record = self.extract(transcript, timer=timer)
        except TranscriptError as exc:
            log.warning('voice_parser.invalid_transcript', error=str(exc))
            return ParseFailure([exc.message])
        except Exception:
            log.exception('voice_parser.extraction_failed')
            return ParseFailure([PARSE_FAILED])

        with timer.stage('validate'):
            outcome = validate_record(record)

        if outcome.success:
            log.info(
                'voice_parser.parse_complete',
                confidence=record['confidence'],
                below_threshold=record['confidence'] < self.confidence_threshold,
                flag_count=len(record['flags']),
                has_deal=record['deal'] is not None,
                **timer.summary(),
            )
        else:
            log.warning(
                'voice_parser.validation_failed',
                error_count=len(outcome.errors),
                **timer.summary(),
            )
        return outcome

    def extract(self, transcript: str, timer: PipelineTimer | None = None) -> dict[str, Any]:
        """
        Run every extraction stage and assemble the unvalidated record.

        Args:
            transcript: Transcribed voice note
            timer: Optional timer collecting per-stage durations

        Returns:
            camelCase record ready for validate_record()

        Raises:
            TranscriptError: If transcript is not a string
            ExtractionError: If a stage fails unexpectedly
        """
        timer = timer or PipelineTimer()

        with timer.stage('normalize'):
            segments = normalize(transcript)

        customer = self._run_stage('customer', timer, self.customer_extractor.extract, segments)
        interaction = self._run_stage(
            'interaction', timer, self.interaction_extractor.extract, segments
        )
        deal = self._run_stage('deal', timer, self.deal_extractor.extract, segments)

        with timer.stage('flags'):
            flags = identify_flags(segments, customer, interaction)
        with timer.stage('confidence'):
            confidence = calculate_confidence(customer, interaction, flags)

        return assemble_record(customer, interaction, deal, confidence, flags)

    @staticmethod
    def _run_stage(
        stage: str,
        timer: PipelineTimer,
        func: Callable[[list[str]], T],
        segments: list[str],
    ) -> T:
        with timer.stage(stage):
            try:
                return func(segments)
            except Exception as exc:
                raise wrap_stage_error(exc, stage, {'segment_count': len(segments)}) from exc


# Shared instance; safe because the parser keeps no per-call state
voice_note_parser = VoiceNoteParser()


def parse(transcript: str) -> ParseOutcome:
    """Parse a transcript with the shared parser instance."""
    return voice_note_parser.parse(transcript)
