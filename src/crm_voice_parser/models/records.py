"""
Customer, Interaction and Deal records produced by the voice note parser.

These are the structural contract handed to the CRM: they are validated once
at the end of a parse and never mutated afterwards (frozen models).

Key design decisions:
- Python attributes are snake_case; the wire format is camelCase
  (keyPoints, nextSteps, followUpDate, closeDate) via an alias generator
- name/company are always populated, falling back to sentinel values
- email is "" or a syntactically valid address, never a partial match
- value and date fields are free-form strings (no numeric/calendar parsing)
- string fields are strict: a non-string is rejected, never coerced
- list fields are tuples, so a validated record is immutable all the way down
"""

from enum import Enum

from pydantic import BaseModel, Field, StrictStr, field_validator
from pydantic.alias_generators import to_camel
from pydantic.networks import validate_email
from pydantic_core import PydanticCustomError

UNKNOWN_CUSTOMER = 'Unknown Customer'
UNKNOWN_COMPANY = 'Unknown Company'
NO_KEY_POINTS = 'No specific key points identified in the transcript.'
NO_NEXT_STEPS = 'No next steps identified in the transcript.'

RECORD_CONFIG = {
    'alias_generator': to_camel,
    'populate_by_name': True,
    'frozen': True,
    'use_enum_values': True,
}


class InteractionType(str, Enum):
    """Kind of customer touchpoint described by the voice note."""

    MEETING = 'meeting'
    CALL = 'call'
    DEMO = 'demo'
    EMAIL = 'email'
    OTHER = 'other'


class DealStage(str, Enum):
    """Deal stage lifecycle."""

    PROSPECTING = 'prospecting'
    QUALIFICATION = 'qualification'
    PROPOSAL = 'proposal'
    NEGOTIATION = 'negotiation'
    CLOSED_WON = 'closed_won'
    CLOSED_LOST = 'closed_lost'


def is_valid_email(value: str) -> bool:
    """True when value is a syntactically valid email address."""
    try:
        validate_email(value)
    except PydanticCustomError:
        return False
    return True


class CustomerRecord(BaseModel):
    """Who the voice note is about."""

    name: StrictStr = Field(..., min_length=1, description='Contact name or UNKNOWN_CUSTOMER')
    company: StrictStr = Field(..., min_length=1, description='Company name or UNKNOWN_COMPANY')
    email: StrictStr = Field(default='', description='Email address, empty if not found')
    phone: StrictStr = Field(default='', description='Free-form phone number, empty if not found')
    notes: StrictStr = Field(default='', description='Free-form notes')

    @field_validator('email')
    @classmethod
    def email_must_be_valid(cls, value: str) -> str:
        """Allow the empty string; anything else must be a valid address."""
        if value:
            validate_email(value)
        return value

    model_config = RECORD_CONFIG


class InteractionRecord(BaseModel):
    """What happened during the touchpoint."""

    type: InteractionType = Field(..., description='Interaction classification')
    summary: StrictStr = Field(..., min_length=1, description='Opening sentences of the note')
    key_points: tuple[StrictStr, ...] = Field(
        ..., min_length=1, description='Discussion highlights (placeholder if none found)'
    )
    next_steps: tuple[StrictStr, ...] = Field(
        ..., min_length=1, description='Agreed actions (placeholder if none found)'
    )
    follow_up_date: StrictStr | None = Field(
        default=None, description='Free-form follow-up date (e.g. "tuesday", "3/15")'
    )

    model_config = RECORD_CONFIG


class DealRecord(BaseModel):
    """Sales opportunity, present only when a value or stage signal was found."""

    name: StrictStr = Field(..., min_length=1, description='Synthesised "Deal - <Mon> <YYYY>" name')
    value: StrictStr = Field(default='', description='Numeric amount without currency symbol')
    stage: DealStage = Field(default=DealStage.PROSPECTING, description='Deal stage')
    close_date: StrictStr | None = Field(default=None, description='Free-form expected close date')
    description: StrictStr = Field(default='', description='Discussion sentences describing the deal')

    model_config = RECORD_CONFIG
