"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from app.core.config import Settings
from app.core.db import normalize_database_url

SECRET = "x" * 32


def make_settings(**overrides) -> Settings:
    return Settings(_env_file=None, JWT_SECRET=SECRET, **overrides)


def test_defaults() -> None:
    config = make_settings()

    assert config.api_prefix == "/api"
    assert config.DEFAULT_LOCALE == "en"
    assert config.SUPPORTED_LOCALES == ["en", "ru", "kk"]
    assert config.JWT_EXPIRE_DAYS == 7


def test_wildcard_cors_expands_to_local_origins() -> None:
    config = make_settings(cors_origins=["*"])

    assert "*" not in config.cors_origins
    assert "http://localhost:5173" in config.cors_origins


def test_explicit_cors_origins_are_kept() -> None:
    config = make_settings(cors_origins=["https://marine.example"])
    assert config.cors_origins == ["https://marine.example"]


def test_locales_are_normalized() -> None:
    config = make_settings(SUPPORTED_LOCALES=[" EN", "Ru "], DEFAULT_LOCALE="RU")

    assert config.SUPPORTED_LOCALES == ["en", "ru"]
    assert config.DEFAULT_LOCALE == "ru"


def test_default_locale_must_be_supported() -> None:
    with pytest.raises(ValidationError, match="DEFAULT_LOCALE"):
        make_settings(SUPPORTED_LOCALES=["en", "ru"], DEFAULT_LOCALE="kk")


def test_supported_locales_must_not_be_empty() -> None:
    with pytest.raises(ValidationError, match="must not be empty"):
        make_settings(SUPPORTED_LOCALES=[])


def test_short_jwt_secret_rejected() -> None:
    with pytest.raises(ValidationError, match="at least 32"):
        Settings(_env_file=None, JWT_SECRET="short")


def test_locale_config() -> None:
    config = make_settings(SUPPORTED_LOCALES=["ru", "en"], DEFAULT_LOCALE="ru")
    locale_config = config.locale_config()

    assert locale_config.default_locale == "ru"
    assert locale_config.locales == ("ru", "en")


@pytest.mark.parametrize(
    ("host", "recipient", "enabled"),
    [
        ("smtp.example.com", "sales@example.com", True),
        ("smtp.example.com", None, False),
        (None, "sales@example.com", False),
    ],
)
def test_smtp_enabled(host, recipient, enabled) -> None:
    config = make_settings(SMTP_HOST=host, CONTACTS_TO=recipient)
    assert config.smtp_enabled is enabled


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("postgresql://u:p@db/marine", "postgresql+asyncpg://u:p@db/marine"),
        ("postgres://u:p@db/marine", "postgresql+asyncpg://u:p@db/marine"),
        ("postgresql+psycopg2://u:p@db/marine", "postgresql+asyncpg://u:p@db/marine"),
        ("postgresql+asyncpg://u:p@db/marine", "postgresql+asyncpg://u:p@db/marine"),
        ("sqlite:///./marine.db", "sqlite+aiosqlite:///./marine.db"),
        ("sqlite+aiosqlite:///./marine.db", "sqlite+aiosqlite:///./marine.db"),
    ],
)
def test_normalize_database_url(url: str, expected: str) -> None:
    assert normalize_database_url(url) == expected
