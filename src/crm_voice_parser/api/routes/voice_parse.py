"""POST /crm/voice-parse: validate a voice note and parse it into CRM data."""

from typing import Any

import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from crm_voice_parser.logging import logging_context, new_trace_id
from crm_voice_parser.models.input import VoiceNoteInput
from crm_voice_parser.pipeline.parser import PARSE_FAILED, VoiceNoteParser, voice_note_parser
from crm_voice_parser.pipeline.validator import format_error

from ..config import Settings, get_settings

logger = structlog.get_logger(__name__)

router = APIRouter()

# Callers may supply their own request id; it is echoed on every response.
TRACE_HEADER = "X-Request-ID"


def get_parser() -> VoiceNoteParser:
    """Shared parser dependency (overridable in tests)."""
    return voice_note_parser


@router.post("/crm/voice-parse")
async def voice_parse(
    payload: dict[str, Any],
    request: Request,
    parser: VoiceNoteParser = Depends(get_parser),
    settings: Settings = Depends(get_settings),
):
    """Parse a transcribed voice note; nothing is persisted."""
    trace_id = request.headers.get(TRACE_HEADER) or new_trace_id()
    headers = {TRACE_HEADER: trace_id}

    with logging_context(trace_id=trace_id):
        try:
            voice_note = VoiceNoteInput.model_validate(payload)
        except ValidationError as e:
            details = [format_error(error) for error in e.errors()]
            logger.info("voice_parse.invalid_input", details=details)
            return JSONResponse(
                status_code=400,
                content={"error": "Invalid input", "details": details},
                headers=headers,
            )

        with logging_context(user_id=str(voice_note.user_id)):
            log = logger.bind(transcript_chars=len(voice_note.transcript))
            log.info("voice_parse.received")

            try:
                outcome = parser.parse(voice_note.transcript)
            except Exception as e:
                log.error("voice_parse.failed", error=str(e), error_type=type(e).__name__)
                return JSONResponse(
                    status_code=500,
                    content={"error": "Internal server error"},
                    headers=headers,
                )

            if not outcome.success:
                log.warning("voice_parse.rejected", errors=outcome.errors)
                return JSONResponse(
                    status_code=422,
                    content={"error": PARSE_FAILED, "details": outcome.errors},
                    headers=headers,
                )

            log.info("voice_parse.complete", confidence=outcome.result.confidence)

    body: dict[str, Any] = {"success": True, "data": outcome.result.to_dict()}
    if settings.INCLUDE_TRANSCRIPT:
        body["originalTranscript"] = voice_note.transcript
    return JSONResponse(content=body, headers=headers)
