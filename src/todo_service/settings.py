"""
todo_service.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for the durable store, the cache store and the API.
- Resolve the SQLAlchemy/Redis connection URLs from either a single URL or parts.
- Hide secrets from repr/logging (DB password, DB URL).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url

_SQLITE_FALLBACK_URL = "sqlite+aiosqlite:///./todos.db"
_ASYNC_PG_DRIVER = "postgresql+asyncpg"


class Settings(BaseSettings):
    """
    Env names match the deployment contract (DB_HOST, DB_URL, REDIS_HOST, ...),
    so no prefix is applied.
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "todo-service"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 3000

    # Durable store: either a single URL or discrete connection parameters.
    db_url: str | None = Field(default=None, repr=False)
    db_host: str | None = None
    db_port: int = 5432
    db_name: str | None = None
    db_user: str | None = None
    db_password: str | None = Field(default=None, repr=False)

    # Cache store: optional. Leaving both unset disables cache features.
    redis_url: str | None = Field(default=None, repr=False)
    redis_host: str | None = None
    redis_port: int = 6379

    @property
    def database_url(self) -> str:
        if self.db_url:
            return _normalize_db_url(self.db_url)
        if self.db_host:
            return URL.create(
                _ASYNC_PG_DRIVER,
                username=self.db_user,
                password=self.db_password,
                host=self.db_host,
                port=self.db_port,
                database=self.db_name,
            ).render_as_string(hide_password=False)
        return _SQLITE_FALLBACK_URL

    @property
    def cache_url(self) -> str | None:
        if self.redis_url:
            return self.redis_url
        if self.redis_host:
            return f"redis://{self.redis_host}:{self.redis_port}"
        return None

    @property
    def masked_database_url(self) -> str:
        # Safe for logs: the password is replaced by "***".
        return make_url(self.database_url).render_as_string(hide_password=True)


def _normalize_db_url(raw: str) -> str:
    # Plain libpq-style URLs get the async driver the engine needs.
    for scheme in ("postgres://", "postgresql://"):
        if raw.startswith(scheme):
            return f"{_ASYNC_PG_DRIVER}://{raw[len(scheme):]}"
    return raw


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Tests build `Settings(...)` directly and pass it to `create_app`; only the process
# entrypoint goes through the cached `get_settings()`.
