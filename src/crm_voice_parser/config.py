"""
Configuration management for the CRM voice note parser.

Loads settings from environment variables with sensible defaults.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file from project root
_project_root = Path(__file__).parent.parent.parent
_env_file = _project_root / '.env'
if _env_file.exists():
    load_dotenv(_env_file)

_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def _env_bool(name: str, default: str = 'false') -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Configuration settings loaded from environment."""

    # Parser
    # Reserved for review gating; the score itself never depends on it.
    CONFIDENCE_THRESHOLD: float = float(os.getenv('CONFIDENCE_THRESHOLD', '0.7'))

    # Logging
    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')
    LOG_JSON: bool = _env_bool('LOG_JSON')

    @classmethod
    def validate(cls) -> list[str]:
        """
        Validate that configuration values are usable.

        Returns:
            List of human-readable configuration problems
        """
        problems = []
        if not 0.0 <= cls.CONFIDENCE_THRESHOLD <= 1.0:
            problems.append('CONFIDENCE_THRESHOLD must be between 0 and 1')
        if cls.LOG_LEVEL.upper() not in _LOG_LEVELS:
            problems.append(f'LOG_LEVEL must be one of {", ".join(_LOG_LEVELS)}')
        return problems


# Singleton config instance
config = Config()
