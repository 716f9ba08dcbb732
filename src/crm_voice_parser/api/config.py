"""Configuration for the voice-parse HTTP service."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """HTTP service settings loaded from environment variables."""

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # Echo the submitted transcript back as originalTranscript
    INCLUDE_TRANSCRIPT: bool = True


@lru_cache
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()
