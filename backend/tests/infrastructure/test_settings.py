"""Settings — defaults and environment overrides."""

import pytest
from pydantic import ValidationError

from client_registry.config import Settings


def test_defaults(monkeypatch):
    for var in ("LOG_LEVEL", "LOG_FORMAT", "SEED_DEMO_CLIENTS"):
        monkeypatch.delenv(var, raising=False)
    settings = Settings(_env_file=None)
    assert settings.log_level == "INFO"
    assert settings.log_format == "json"
    assert settings.seed_demo_clients is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SEED_DEMO_CLIENTS", "true")
    monkeypatch.setenv("LOG_FORMAT", "TEXT")
    settings = Settings(_env_file=None)
    assert settings.seed_demo_clients is True
    assert settings.log_format == "text"


def test_unknown_log_format_rejected(monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "xml")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
