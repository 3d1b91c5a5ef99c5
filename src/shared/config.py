"""
Application Configuration

Environment-based settings for the Submission Service.

Responsibility:
    - Read configuration from environment variables (and .env via python-dotenv)
    - Build the allowed CORS origin list (exact entries + wildcard patterns)
    - Provide one immutable Settings object passed explicitly to create_app()

Environment Variables:
    MONGO_URI            MongoDB connection string (required to start the server)
    MONGO_DB_NAME        Database used when the URI names none (default "submissions_db")
    MONGO_TIMEOUT_MS     Server selection timeout in ms (default 5000)
    HOST / PORT          Bind address (default 0.0.0.0:5000)
    APP_ENV              "development" exposes error detail in responses (default "production")
    FRONTEND_URL         Default allowed origin (default "http://localhost:3000")
    CORS_ORIGINS         Extra comma-separated origins, "*" entries are subdomain wildcards
    RESUME_STORAGE       "disk" or "inline" (default "disk")
    UPLOAD_DIR           Disk storage directory (default "uploads")
    MAX_RESUME_SIZE_MB   Resume size bound in MB, 0 disables it (default 5)
    LOG_LEVEL            Root log level (default "INFO")
"""

import logging
import os
import re
from dataclasses import dataclass, field
from typing import Final, Literal, Optional

from dotenv import load_dotenv

from src.domain.shared.exceptions import ConfigurationError

FIXED_ALLOWED_ORIGINS: Final[tuple[str, ...]] = (
    "http://localhost:3000",
    "http://localhost:5173",
    "https://*.vercel.app",
)

DEFAULT_FRONTEND_URL: Final[str] = "http://localhost:3000"
DEFAULT_PORT: Final[int] = 5000
DEFAULT_MAX_RESUME_SIZE_MB: Final[int] = 5
RESUME_STORAGE_MODES: Final[tuple[str, ...]] = ("disk", "inline")

# One DNS label or several, used in place of "*" in wildcard origins
_SUBDOMAIN_REGEX: Final[str] = r"[A-Za-z0-9-]+(?:\.[A-Za-z0-9-]+)*"


def _parse_csv(value: Optional[str]) -> list[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def _unique(items: list[str]) -> list[str]:
    seen: set[str] = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def split_origins(origins: list[str]) -> tuple[list[str], Optional[str]]:
    """
    Split configured origins into exact matches and one combined regex.

    Args:
        origins: Origins such as "http://localhost:3000" or "https://*.vercel.app"

    Returns:
        (exact_origins, origin_regex). origin_regex is None when no entry
        contains a wildcard. Starlette applies it with re.fullmatch.

    Examples:
        >>> exact, regex = split_origins(["http://localhost:3000", "https://*.vercel.app"])
        >>> exact
        ['http://localhost:3000']
        >>> re.fullmatch(regex, "https://my-app.vercel.app") is not None
        True
    """
    exact = [origin.rstrip("/") for origin in origins if "*" not in origin]
    patterns = [
        re.escape(origin.rstrip("/")).replace(r"\*", _SUBDOMAIN_REGEX)
        for origin in origins
        if "*" in origin
    ]

    if not patterns:
        return exact, None
    if len(patterns) == 1:
        return exact, patterns[0]
    return exact, "|".join(f"(?:{pattern})" for pattern in patterns)


@dataclass(frozen=True)
class Settings:
    """
    Immutable runtime configuration.

    Build with Settings.from_env() in production, or construct directly in tests.

    Attributes:
        mongo_uri: MongoDB connection string (None when not configured)
        mongo_db_name: Fallback database name
        mongo_collection: Collection holding submissions
        mongo_timeout_ms: Server selection timeout
        host: Bind address
        port: Listening port
        environment: "development" or "production"
        frontend_url: Default allowed origin
        extra_origins: Additional allowed origins from CORS_ORIGINS
        resume_storage: "disk" or "inline"
        upload_dir: Directory for disk storage
        max_resume_size_mb: Size bound in MB, None for unlimited
        log_level: Root log level name
    """

    mongo_uri: Optional[str] = None
    mongo_db_name: str = "submissions_db"
    mongo_collection: str = "submissions"
    mongo_timeout_ms: int = 5000
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    environment: str = "production"
    frontend_url: str = DEFAULT_FRONTEND_URL
    extra_origins: tuple[str, ...] = field(default_factory=tuple)
    resume_storage: Literal["disk", "inline"] = "disk"
    upload_dir: str = "uploads"
    max_resume_size_mb: Optional[float] = DEFAULT_MAX_RESUME_SIZE_MB
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.resume_storage not in RESUME_STORAGE_MODES:
            raise ConfigurationError(
                f"RESUME_STORAGE must be one of {RESUME_STORAGE_MODES}, "
                f"got {self.resume_storage!r}"
            )
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigurationError(f"LOG_LEVEL is not a log level: {self.log_level!r}")

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            load_env_file: Load a .env file first (python-dotenv, never overrides
                variables already set)

        Raises:
            ConfigurationError: If a numeric variable cannot be parsed, or
                RESUME_STORAGE or LOG_LEVEL is unknown
        """
        if load_env_file:
            load_dotenv()

        try:
            port = int(os.getenv("PORT", str(DEFAULT_PORT)))
            timeout_ms = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))
            max_size_mb = float(
                os.getenv("MAX_RESUME_SIZE_MB", str(DEFAULT_MAX_RESUME_SIZE_MB))
            )
        except ValueError as e:
            raise ConfigurationError(f"Invalid numeric configuration value: {e}") from e

        return cls(
            mongo_uri=os.getenv("MONGO_URI") or None,
            mongo_db_name=os.getenv("MONGO_DB_NAME", "submissions_db"),
            mongo_timeout_ms=timeout_ms,
            host=os.getenv("HOST", "0.0.0.0"),
            port=port,
            environment=os.getenv("APP_ENV", "production").strip().lower(),
            frontend_url=os.getenv("FRONTEND_URL", DEFAULT_FRONTEND_URL),
            extra_origins=tuple(_parse_csv(os.getenv("CORS_ORIGINS"))),
            resume_storage=os.getenv("RESUME_STORAGE", "disk").strip().lower(),
            upload_dir=os.getenv("UPLOAD_DIR", "uploads"),
            max_resume_size_mb=max_size_mb if max_size_mb > 0 else None,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def max_resume_size_bytes(self) -> Optional[int]:
        if self.max_resume_size_mb is None:
            return None
        return int(self.max_resume_size_mb * 1024 * 1024)

    @property
    def allowed_origins(self) -> list[str]:
        """Fixed origins + FRONTEND_URL + CORS_ORIGINS, without duplicates."""
        return _unique(
            list(FIXED_ALLOWED_ORIGINS) + [self.frontend_url] + list(self.extra_origins)
        )

    def require_mongo_uri(self) -> str:
        """
        Return the MongoDB connection string.

        Raises:
            ConfigurationError: If MONGO_URI is not configured
        """
        if not self.mongo_uri:
            raise ConfigurationError("MONGO_URI is not set")
        return self.mongo_uri
