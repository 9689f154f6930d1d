"""
Tests for environment-driven configuration (config.settings).
"""

from config.settings import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("LOG_TO_FILE", raising = False)

    settings = Settings()

    assert settings.MIN_WORD_COUNT == 10
    assert settings.EXCERPT_MAX_LENGTH == 100
    assert settings.API_PREFIX == "/api/v1"
    assert settings.LOG_TO_FILE is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("MIN_WORD_COUNT", "25")
    monkeypatch.setenv("LOG_TO_FILE", "true")

    settings = Settings()

    assert settings.MIN_WORD_COUNT == 25
    assert settings.LOG_TO_FILE is True
