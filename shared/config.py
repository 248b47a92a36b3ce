"""
Centralized configuration for the Photostore backend.

All settings are loaded from environment variables with sensible defaults.
Auth settings are namespaced with JWT_*, store settings with DATABASE_*.
"""

import re
from datetime import timedelta
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError

_DURATION_RE = re.compile(r"^\s*(\d+)\s*([smhd]?)\s*$", re.IGNORECASE)
_DURATION_UNITS = {"": 1, "s": 1, "m": 60, "h": 3600, "d": 86400}


def parse_duration(value: str | int) -> timedelta:
    """
    Parse a token lifetime such as ``"7d"``, ``"24h"``, ``"30m"`` or ``3600``.

    Bare numbers are seconds.

    Raises:
        ValueError: If the value is not a positive duration
    """
    if isinstance(value, int):
        seconds = value
    else:
        match = _DURATION_RE.match(value)
        if not match:
            raise ValueError(f"Invalid duration: {value!r}")
        seconds = int(match.group(1)) * _DURATION_UNITS[match.group(2).lower()]

    if seconds <= 0:
        raise ValueError(f"Duration must be positive: {value!r}")
    return timedelta(seconds=seconds)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Photostore API"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 3001
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Store
    database_url: str = "sqlite+aiosqlite:///./data/photostore.sqlite"
    database_echo: bool = False

    # Tokens
    jwt_secret: str = ""
    jwt_expires_in: str = "7d"
    jwt_issuer: str = "photostore-api"
    jwt_audience: str = "photostore-users"

    # Password hashing (bcrypt cost factor)
    password_hash_rounds: int = Field(default=10, ge=10, le=11)

    # Logging
    log_level: str = "INFO"
    log_format: Literal["plain", "rich"] = "plain"
    log_dir: Optional[str] = None

    @field_validator("jwt_secret", mode="before")
    @classmethod
    def strip_secret(cls, v):
        """Strip whitespace from the signing secret."""
        if isinstance(v, str):
            return v.strip()
        return v or ""

    @field_validator("jwt_expires_in")
    @classmethod
    def check_expires_in(cls, v: str) -> str:
        parse_duration(v)
        return v

    @property
    def token_ttl(self) -> timedelta:
        """Token lifetime as a timedelta."""
        return parse_duration(self.jwt_expires_in)


def ensure_runtime_config(settings: Settings) -> None:
    """
    Fail fast on settings the service cannot run without.

    Called from the application lifespan so a missing secret stops
    startup instead of surfacing on the first login.

    Raises:
        ConfigError: If the token signing secret is unset
    """
    if not settings.jwt_secret:
        raise ConfigError(
            "JWT_SECRET is not set. Refusing to start without a token signing secret."
        )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
