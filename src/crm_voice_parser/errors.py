"""
Custom exceptions for the CRM voice note parser.

Provides:
- Typed exception hierarchy for the different failure modes
- Error context preservation for debugging

Soft extraction gaps (missing name, no key points, ...) are never errors:
they are resolved with sentinel values and surfaced as flags. Only input
problems, unexpected stage failures and schema violations use this hierarchy.
"""

from typing import Any


class VoiceParserError(Exception):
    """Base exception for all voice parser errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            return f"{self.message} | context={self.context}"
        return self.message


# =============================================================================
# Pipeline Errors
# =============================================================================


class PipelineError(VoiceParserError):
    """Base class for pipeline-related errors."""

    pass


class TranscriptError(PipelineError):
    """The transcript input is unusable (not a string, or empty at the HTTP boundary)."""

    pass


class ExtractionError(PipelineError):
    """Unexpected failure inside one extraction stage."""

    def __init__(
        self,
        message: str,
        stage: str,
        context: dict[str, Any] | None = None,
    ):
        ctx = dict(context or {})
        ctx['stage'] = stage
        super().__init__(message, context=ctx)
        self.stage = stage


class SchemaValidationError(PipelineError):
    """The assembled record violates the structural contract."""

    def __init__(self, errors: list[str], context: dict[str, Any] | None = None):
        super().__init__(
            f"Record failed validation with {len(errors)} error(s)",
            context=context,
        )
        self.errors = list(errors)


# =============================================================================
# Error Handling Utilities
# =============================================================================


def wrap_stage_error(
    exc: Exception,
    stage: str,
    context: dict[str, Any] | None = None,
) -> ExtractionError:
    """
    Wrap an unexpected exception raised inside a pipeline stage.

    Args:
        exc: The original exception
        stage: Pipeline stage name (e.g. "customer", "deal")
        context: Additional context for debugging

    Returns:
        ExtractionError tagged with the stage name
    """
    ctx = context or {}
    ctx['original_error'] = str(exc)
    ctx['error_type'] = type(exc).__name__
    return ExtractionError(
        f"{stage} extraction failed: {exc}",
        stage=stage,
        context=ctx,
    )
