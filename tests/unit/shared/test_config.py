"""
Tests for environment-based Settings.

Covers:
- Defaults and environment overrides
- Resume size bound (0 disables it)
- Allowed origins and wildcard regex
- Invalid configuration
"""

import re

import pytest

from src.domain.shared.exceptions import ConfigurationError
from src.shared.config import FIXED_ALLOWED_ORIGINS, Settings, split_origins

ENV_VARS = (
    "MONGO_URI",
    "MONGO_DB_NAME",
    "MONGO_TIMEOUT_MS",
    "HOST",
    "PORT",
    "APP_ENV",
    "FRONTEND_URL",
    "CORS_ORIGINS",
    "RESUME_STORAGE",
    "UPLOAD_DIR",
    "MAX_RESUME_SIZE_MB",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test from an empty configuration."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


# ============================================================================
# from_env()
# ============================================================================


def test_defaults():
    settings = Settings.from_env(load_env_file=False)

    assert settings.mongo_uri is None
    assert settings.mongo_db_name == "submissions_db"
    assert settings.mongo_timeout_ms == 5000
    assert settings.host == "0.0.0.0"
    assert settings.port == 5000
    assert settings.environment == "production"
    assert not settings.is_development
    assert settings.resume_storage == "disk"
    assert settings.upload_dir == "uploads"
    assert settings.max_resume_size_bytes == 5 * 1024 * 1024
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("MONGO_URI", "mongodb://db:27017/jobs")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("APP_ENV", "Development")
    monkeypatch.setenv("RESUME_STORAGE", "INLINE")
    monkeypatch.setenv("MAX_RESUME_SIZE_MB", "2.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings.from_env(load_env_file=False)

    assert settings.mongo_uri == "mongodb://db:27017/jobs"
    assert settings.port == 8080
    assert settings.is_development
    assert settings.resume_storage == "inline"
    assert settings.max_resume_size_bytes == int(2.5 * 1024 * 1024)
    assert settings.log_level == "DEBUG"


def test_zero_size_disables_bound(monkeypatch):
    monkeypatch.setenv("MAX_RESUME_SIZE_MB", "0")

    settings = Settings.from_env(load_env_file=False)

    assert settings.max_resume_size_mb is None
    assert settings.max_resume_size_bytes is None


def test_invalid_port(monkeypatch):
    monkeypatch.setenv("PORT", "not-a-number")

    with pytest.raises(ConfigurationError, match="Invalid numeric configuration"):
        Settings.from_env(load_env_file=False)


def test_unknown_resume_storage(monkeypatch):
    monkeypatch.setenv("RESUME_STORAGE", "s3")

    with pytest.raises(ConfigurationError, match="RESUME_STORAGE"):
        Settings.from_env(load_env_file=False)


def test_unknown_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "bogus")

    with pytest.raises(ConfigurationError, match="LOG_LEVEL"):
        Settings.from_env(load_env_file=False)


def test_empty_mongo_uri_treated_as_missing(monkeypatch):
    monkeypatch.setenv("MONGO_URI", "")

    settings = Settings.from_env(load_env_file=False)

    with pytest.raises(ConfigurationError, match="MONGO_URI is not set"):
        settings.require_mongo_uri()


def test_require_mongo_uri_returns_value():
    settings = Settings(mongo_uri="mongodb://localhost:27017")

    assert settings.require_mongo_uri() == "mongodb://localhost:27017"


# ============================================================================
# ORIGINS
# ============================================================================


def test_allowed_origins_fixed_plus_frontend_plus_extra(monkeypatch):
    monkeypatch.setenv("FRONTEND_URL", "https://jobs.example.com")
    monkeypatch.setenv("CORS_ORIGINS", " https://a.example.com, ,http://localhost:3000 ")

    settings = Settings.from_env(load_env_file=False)

    assert settings.allowed_origins == list(FIXED_ALLOWED_ORIGINS) + [
        "https://jobs.example.com",
        "https://a.example.com",
    ]


def test_default_frontend_url_not_duplicated():
    settings = Settings()

    assert settings.allowed_origins == list(FIXED_ALLOWED_ORIGINS)


def test_split_origins_without_wildcards():
    exact, regex = split_origins(["http://localhost:3000", "https://site.com/"])

    assert exact == ["http://localhost:3000", "https://site.com"]
    assert regex is None


def test_split_origins_single_wildcard():
    exact, regex = split_origins(list(FIXED_ALLOWED_ORIGINS))

    assert exact == ["http://localhost:3000", "http://localhost:5173"]
    assert re.fullmatch(regex, "https://my-app.vercel.app")
    assert re.fullmatch(regex, "https://my-app-git-main.team.vercel.app")
    assert not re.fullmatch(regex, "https://vercel.app")
    assert not re.fullmatch(regex, "http://my-app.vercel.app")
    assert not re.fullmatch(regex, "https://my-app.vercel.app.evil.com")


def test_split_origins_multiple_wildcards():
    _, regex = split_origins(["https://*.vercel.app", "https://*.netlify.app"])

    assert re.fullmatch(regex, "https://a.vercel.app")
    assert re.fullmatch(regex, "https://b.netlify.app")
    assert not re.fullmatch(regex, "https://b.example.app")
