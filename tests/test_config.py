"""Tests for settings loading and engine construction."""

from __future__ import annotations

import pytest
from pydantic import ValidationError
from sqlalchemy.pool import StaticPool

from worklog.config import Settings
from worklog.infrastructure.database import build_engine


def _settings(**overrides) -> Settings:
    values = {"database_url": "sqlite://", "secret_key": "s3cret"}
    values.update(overrides)
    return Settings(**values)


def test_defaults():
    settings = _settings()

    assert settings.access_token_expire_minutes == 60
    assert settings.notification_read_window_days == 7
    assert settings.log_level == "INFO"
    assert settings.cors_origins == []


def test_log_level_is_normalized_and_validated():
    assert _settings(log_level=" debug ").log_level == "DEBUG"
    with pytest.raises(ValidationError):
        _settings(log_level="chatty")


def test_read_window_must_be_positive():
    with pytest.raises(ValidationError):
        _settings(notification_read_window_days=0)


def test_in_memory_sqlite_shares_one_connection_with_foreign_keys_on():
    engine = build_engine(_settings())

    assert isinstance(engine.pool, StaticPool)
    with engine.connect() as connection:
        assert connection.exec_driver_sql("PRAGMA foreign_keys").scalar() == 1
    engine.dispose()


def test_timezone_must_be_a_known_zone():
    assert _settings(app_timezone=" Europe/Madrid ").app_timezone == "Europe/Madrid"
    assert _settings(app_timezone="").app_timezone == "UTC"
    with pytest.raises(ValidationError):
        _settings(app_timezone="Mars/Olympus")
