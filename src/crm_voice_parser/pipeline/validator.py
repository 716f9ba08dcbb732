"""
Schema validation: the type boundary between extraction and the caller.

The assembled record (or any hand-constructed mapping) is validated against
ParsedResult. Every violated rule is reported; any violation discards the
whole extraction.
"""

from collections.abc import Mapping
from typing import Any

import structlog
from pydantic import ValidationError
from pydantic_core import ErrorDetails

from ..models.result import ParsedResult, ParseFailure, ParseOutcome, ParseSuccess

logger = structlog.get_logger(__name__)


def format_error(error: ErrorDetails) -> str:
    """Render one pydantic error as "<dotted.path>: <message>"."""
    path = '.'.join(str(part) for part in error['loc'])
    if not path:
        return error['msg']
    return f"{path}: {error['msg']}"


def validate_record(record: Mapping[str, Any]) -> ParseOutcome:
    """
    Validate an assembled record against the ParsedResult schema.

    Args:
        record: camelCase mapping with customer / interaction / deal /
            confidence / flags keys

    Returns:
        ParseSuccess with the validated result, or ParseFailure with one
        message per violation
    """
    try:
        result = ParsedResult.model_validate(record)
    except ValidationError as exc:
        errors = [format_error(error) for error in exc.errors()]
        logger.warning('schema_validation.failed', error_count=len(errors), errors=errors)
        return ParseFailure(errors)

    return ParseSuccess(result)
