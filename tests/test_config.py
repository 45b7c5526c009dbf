from datetime import timedelta

import pytest
from pydantic import ValidationError

from catalog_service.config import Settings, parse_duration


@pytest.mark.parametrize(
    "value,expected",
    [
        ("3600", timedelta(hours=1)),
        ("45s", timedelta(seconds=45)),
        ("30m", timedelta(minutes=30)),
        ("1h", timedelta(hours=1)),
        ("7d", timedelta(days=7)),
        ("2H", timedelta(hours=2)),
    ],
)
def test_parse_duration(value, expected):
    assert parse_duration(value) == expected


@pytest.mark.parametrize("value", ["", "0", "1w", "-5m", "one hour"])
def test_parse_duration_rejects_invalid(value):
    with pytest.raises(ValueError):
        parse_duration(value)


def test_settings_reject_bad_lifetime():
    with pytest.raises(ValidationError):
        Settings(JWT_EXPIRES_IN="soon")


def test_database_url_prefers_explicit_url():
    settings = Settings(DATABASE_URL="sqlite:///./x.db", PG_HOST="db")
    assert settings.database_url == "sqlite:///./x.db"


def test_database_url_from_pg_parts(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    settings = Settings(
        _env_file=None,
        PG_HOST="db", PG_PORT=5433, PG_USER="app", PG_PASSWORD="pw", PG_DATABASE="catalog"
    )
    assert settings.database_url == "postgresql+psycopg2://app:pw@db:5433/catalog"


def test_database_url_defaults_to_sqlite(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("PG_HOST", raising=False)
    settings = Settings(_env_file=None)
    assert settings.database_url.startswith("sqlite:///")


def test_settings_are_immutable():
    settings = Settings(JWT_SECRET="s")
    with pytest.raises(ValidationError):
        settings.JWT_SECRET = "other"
