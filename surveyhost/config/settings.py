"""Application settings loaded from environment variables via pydantic-settings.

Values come from environment variables first, then from a ``.env`` file in
the working directory, then from the defaults below.  Field ``cache_type``
maps to ``CACHE_TYPE``, ``disable_cache`` to ``DISABLE_CACHE`` and so on.
"""

from __future__ import annotations

from enum import Enum

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CacheType(str, Enum):  # noqa: UP042 — StrEnum requires Python 3.11+
    """Backing store used by the cache wrapper."""

    LOCAL = "local"  # in-process cachetools store, lost on restart
    REDIS = "redis"  # external store reached through the request context


class Settings(BaseSettings):
    """surveyhost settings.

    Environment variables override defaults. Loaded from .env file when present.
    """

    # Empty values (``DISABLE_CACHE=`` in a .env file) count as unset.
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_ignore_empty=True)

    # === Cache ===
    # Only the exact value "local" selects the in-process store; anything
    # else (including unset) means Redis.
    cache_type: CacheType = CacheType.REDIS
    disable_cache: bool = False
    # Must name the cache's own database (e.g. redis://host:6379/3); the
    # cache clears it with FLUSHDB.  No default, so db 0 is never assumed.
    redis_url: str = ""
    local_cache_max_size: int | None = None

    # === App Config ===
    app_env: str = "development"
    log_level: str = "INFO"

    @field_validator("cache_type", mode="before")
    @classmethod
    def _normalize_cache_type(cls, value: object) -> CacheType:
        if isinstance(value, CacheType):
            return value
        return CacheType.LOCAL if value == "local" else CacheType.REDIS

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"
