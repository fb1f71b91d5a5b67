"""
Configuration helpers for the blog backend.

Routers/services receive a Settings instance instead of reading os.environ
directly. The signing secret has no default: it must come from the
environment (or be passed explicitly when building the app).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from functools import lru_cache
import os

DEFAULT_PORT = 4000
DEFAULT_TOKEN_TTL = 7 * 24 * 60 * 60


class ConfigurationError(RuntimeError):
    """Raised when a required setting is missing."""


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    host: str
    port: int
    data_file: str
    jwt_secret: str
    token_ttl_seconds: int
    cors_origins: tuple[str, ...]
    log_level: str
    log_format: str

    def with_overrides(self, **changes) -> "Settings":
        values = {k: v for k, v in changes.items() if v is not None}
        return replace(self, **values)

    def require_secret(self) -> str:
        secret = (self.jwt_secret or "").strip()
        if not secret:
            raise ConfigurationError("JWT_SECRET must be configured to sign session tokens.")
        return secret


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str | None, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _list(value: str | None, default: tuple[str, ...]) -> tuple[str, ...]:
        if value is None:
            return default
        items = tuple(part.strip() for part in value.split(",") if part.strip())
        return items or default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT"), DEFAULT_PORT),
        data_file=os.getenv("DATA_FILE") or os.path.join(os.getcwd(), "db.json"),
        jwt_secret=os.getenv("JWT_SECRET", ""),
        token_ttl_seconds=_int(os.getenv("TOKEN_TTL_SECONDS"), DEFAULT_TOKEN_TTL),
        cors_origins=_list(os.getenv("CORS_ORIGINS"), ("*",)),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_format=(os.getenv("LOG_FORMAT") or "console").lower(),
    )
