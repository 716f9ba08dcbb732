"""
Tests for configuration loading.
"""

import pytest

from crm_voice_parser.api.config import Settings
from crm_voice_parser.config import Config, _env_bool


class TestConfig:
    """Test the dotenv-backed parser configuration."""

    def test_defaults_are_valid(self):
        assert Config.validate() == []

    def test_default_threshold(self):
        assert 0.0 <= Config.CONFIDENCE_THRESHOLD <= 1.0

    def test_threshold_out_of_range(self, monkeypatch):
        monkeypatch.setattr(Config, "CONFIDENCE_THRESHOLD", 1.5)

        assert Config.validate() == ["CONFIDENCE_THRESHOLD must be between 0 and 1"]

    def test_unknown_log_level(self, monkeypatch):
        monkeypatch.setattr(Config, "LOG_LEVEL", "CHATTY")

        problems = Config.validate()

        assert len(problems) == 1
        assert problems[0].startswith("LOG_LEVEL must be one of")

    @pytest.mark.parametrize(
        "raw, expected",
        [("true", True), ("1", True), (" YES ", True), ("false", False), ("", False)],
    )
    def test_env_bool(self, monkeypatch, raw, expected):
        monkeypatch.setenv("CRM_TEST_FLAG", raw)

        assert _env_bool("CRM_TEST_FLAG") is expected

    def test_env_bool_default(self, monkeypatch):
        monkeypatch.delenv("CRM_TEST_FLAG", raising=False)

        assert _env_bool("CRM_TEST_FLAG", default="on") is True


class TestSettings:
    """Test the HTTP service settings."""

    def test_defaults(self, monkeypatch):
        for name in ("LOG_LEVEL", "LOG_JSON", "INCLUDE_TRANSCRIPT"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings()

        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_JSON is False
        assert settings.INCLUDE_TRANSCRIPT is True

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_JSON", "true")
        monkeypatch.setenv("INCLUDE_TRANSCRIPT", "false")

        settings = Settings()

        assert settings.LOG_JSON is True
        assert settings.INCLUDE_TRANSCRIPT is False
