"""Settings — environment-driven configuration for deserializer logging."""

import pytest
from pydantic import ValidationError

from canvas_jsonapi import JSONAPIDocumentDeserializer
from canvas_jsonapi.config import Settings, get_settings


def test_defaults(monkeypatch):
    for name in ("LOG_LEVEL", "LOG_FORMAT", "LOG_DECODE_FAILURES"):
        monkeypatch.delenv(f"CANVAS_JSONAPI_{name}", raising=False)
    settings = Settings(_env_file=None)
    assert settings.log_level == "INFO"
    assert settings.log_format == "text"
    assert settings.log_decode_failures is True


def test_reads_prefixed_environment(monkeypatch):
    monkeypatch.setenv("CANVAS_JSONAPI_LOG_LEVEL", " debug ")
    monkeypatch.setenv("CANVAS_JSONAPI_LOG_FORMAT", "json")
    monkeypatch.setenv("CANVAS_JSONAPI_LOG_DECODE_FAILURES", "false")
    settings = Settings(_env_file=None)
    assert settings.log_level == "DEBUG"
    assert settings.log_format == "json"
    assert settings.log_decode_failures is False


def test_rejects_unknown_log_format(monkeypatch):
    monkeypatch.setenv("CANVAS_JSONAPI_LOG_FORMAT", "xml")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_deserializer_uses_settings(monkeypatch):
    monkeypatch.setenv("CANVAS_JSONAPI_LOG_DECODE_FAILURES", "0")
    get_settings.cache_clear()
    try:
        assert JSONAPIDocumentDeserializer().log_failures is False
        assert JSONAPIDocumentDeserializer(log_failures=True).log_failures is True
    finally:
        get_settings.cache_clear()
