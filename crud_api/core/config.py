"""
Configuration helpers for the CRUD backend.

Exposes a frozen Settings object read from environment variables so that
routers/services/db helpers do not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


DEFAULT_DATABASE_URL = "sqlite:///banco.db"
DEFAULT_PORT = 3000


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    host: str
    port: int
    cors_origins: tuple[str, ...]
    log_level: str
    auto_migrate: bool


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    def _origins(value: str | None) -> tuple[str, ...]:
        items = [item.strip() for item in (value or "*").split(",") if item.strip()]
        return tuple(items) or ("*",)

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=(os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL).strip(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", str(DEFAULT_PORT)), DEFAULT_PORT),
        cors_origins=_origins(os.getenv("CORS_ORIGINS")),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        auto_migrate=_bool(os.getenv("AUTO_MIGRATE"), True),
    )
