"""
Parse result models.

ParsedResult aggregates the three records plus the confidence score and
flags. ParseOutcome is the tagged union returned by the parser: a
ParseSuccess wrapping a validated ParsedResult, or a ParseFailure listing
every validation error. There is no partial success.
"""

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, Field, StrictStr, field_validator

from ..errors import SchemaValidationError
from .records import RECORD_CONFIG, CustomerRecord, DealRecord, InteractionRecord


class ParsedResult(BaseModel):
    """Structured CRM data extracted from one voice note."""

    customer: CustomerRecord
    interaction: InteractionRecord
    deal: DealRecord | None = Field(
        default=None, description='Omitted when no value or stage signal was found'
    )
    confidence: float = Field(
        ..., strict=True, ge=0.0, le=1.0, description='Extraction completeness (0.0-1.0)'
    )
    flags: tuple[StrictStr, ...] = Field(default=(), description='Data-quality warnings')

    @field_validator('flags')
    @classmethod
    def flags_must_be_distinct(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if len(set(value)) != len(value):
            raise ValueError('flags must be distinct')
        return value

    def to_dict(self) -> dict[str, Any]:
        """Serialise with camelCase keys, omitting absent optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True, mode='json')

    model_config = RECORD_CONFIG


@dataclass(frozen=True)
class ParseSuccess:
    """Successful parse: a validated record owned by the caller."""

    result: ParsedResult

    @property
    def success(self) -> bool:
        return True

    def unwrap(self) -> ParsedResult:
        return self.result


@dataclass(frozen=True)
class ParseFailure:
    """Failed parse: one human-readable message per violated rule."""

    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return False

    def unwrap(self) -> ParsedResult:
        """Raise SchemaValidationError; a failure never carries a usable record."""
        raise SchemaValidationError(self.errors)


ParseOutcome = ParseSuccess | ParseFailure
