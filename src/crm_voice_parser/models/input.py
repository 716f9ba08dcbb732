"""
Input model for a voice note submitted over HTTP.

The transcript is produced upstream by speech-to-text; the parser only
requires that it is a non-empty string.
"""

from uuid import UUID

from pydantic import BaseModel, Field, field_validator


class VoiceNoteInput(BaseModel):
    """A transcribed voice note and the user who recorded it."""

    transcript: str = Field(..., description='Transcribed voice note text')
    user_id: UUID = Field(..., alias='userId', description='Recording user UUID')

    @field_validator('transcript')
    @classmethod
    def transcript_not_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError('Transcript cannot be empty')
        return value

    model_config = {'populate_by_name': True}
