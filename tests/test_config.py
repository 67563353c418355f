"""Tests for configuration settings."""
import pytest

from core.config import DEFAULT_API_URL, Settings, get_settings

ENV_VARS = (
    "VOCAB_API_URL",
    "VOCAB_API_TIMEOUT",
    "VOCAB_APPEARANCE_MODE",
    "LOG_LEVEL",
    "LOG_FILE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_settings_defaults():
    settings = get_settings()
    assert settings.api.url == DEFAULT_API_URL
    assert settings.api.timeout == 10
    assert settings.ui.appearance_mode == "dark"
    assert settings.logging.level == "INFO"
    assert settings.logging.file is None


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("VOCAB_API_URL", "https://vocab.example.com/api")
    monkeypatch.setenv("VOCAB_API_TIMEOUT", "2.5")
    monkeypatch.setenv("VOCAB_APPEARANCE_MODE", "Light")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FILE", "logs/app.log")

    settings = get_settings()
    assert settings.api.url == "https://vocab.example.com/api"
    assert settings.api.timeout == 2.5
    assert settings.ui.appearance_mode == "light"
    assert settings.logging.level == "DEBUG"
    assert settings.logging.file == "logs/app.log"


@pytest.mark.parametrize(
    "name, value, message",
    [
        ("VOCAB_API_URL", "localhost:3000/api", "VOCAB_API_URL"),
        ("VOCAB_API_TIMEOUT", "0", "VOCAB_API_TIMEOUT"),
        ("VOCAB_API_TIMEOUT", "abc", "VOCAB_API_TIMEOUT"),
        ("VOCAB_API_TIMEOUT", "nan", "VOCAB_API_TIMEOUT"),
        ("VOCAB_APPEARANCE_MODE", "neon", "VOCAB_APPEARANCE_MODE"),
        ("LOG_LEVEL", "LOUD", "LOG_LEVEL"),
    ],
)
def test_invalid_settings(monkeypatch, name, value, message):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError, match=message):
        Settings().validate()
