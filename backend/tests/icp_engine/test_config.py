# tests/icp_engine/test_config.py
"""
Tests for settings and logging setup

Run with: pytest tests/icp_engine/test_config.py -v
"""

import logging

from prospect_intel.config import Settings
from prospect_intel.logging_config import configure_logging, LOG_FORMAT


class TestSettings:
    """Test environment-driven settings"""

    def test_defaults(self, monkeypatch):
        for key in ("DEFAULT_SCORING_PROFILE", "BATCH_MAX_CONCURRENCY", "WEB_RESEARCH_MAX_ARTICLES"):
            monkeypatch.delenv(key, raising=False)
        settings = Settings()

        assert settings.DEFAULT_SCORING_PROFILE == "standard"
        assert settings.BATCH_MAX_CONCURRENCY == 3
        assert settings.WEB_RESEARCH_MAX_ARTICLES == 20

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("BATCH_MAX_CONCURRENCY", "2")
        monkeypatch.setenv("SOURCE_LOOKUP_TIMEOUT_SECONDS", "5.5")

        settings = Settings()

        assert settings.BATCH_MAX_CONCURRENCY == 2
        assert settings.SOURCE_LOOKUP_TIMEOUT_SECONDS == 5.5


class TestLogging:
    """Test logging setup"""

    def test_level_override(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        configure_logging("debug")

        assert calls[0]["level"] == logging.DEBUG
        assert calls[0]["format"] == LOG_FORMAT

    def test_unknown_level_falls_back_to_info(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        configure_logging("chatty")

        assert calls[0]["level"] == logging.INFO
