"""
tests.conftest

Shared fixtures.

Responsibilities:
- Point the durable store at a throwaway SQLite file per test.
- Provide an in-process stand-in for the Redis handle the Cache Client wraps.
- Serve the app over httpx with its lifespan driven explicitly.
"""

from __future__ import annotations

import math
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI
from redis.exceptions import ConnectionError as RedisConnectionError
from sqlalchemy.ext.asyncio import create_async_engine

from todo_service.api.app import create_app
from todo_service.cache.client import CacheClient
from todo_service.db.client import StorageClient
from todo_service.settings import Settings

UNREACHABLE_DB_URL = "sqlite+aiosqlite:////nonexistent-dir/todo-service/todos.db"


class FakeRedis:
    """The subset of `redis.asyncio.Redis` the Cache Client calls, with TTL bookkeeping."""

    def __init__(self, *, reachable: bool = True) -> None:
        self.reachable = reachable
        self.closed = False
        self._data: dict[str, str] = {}
        self._expires_at: dict[str, float] = {}

    def _check(self) -> None:
        if not self.reachable:
            raise RedisConnectionError("Error 111 connecting to localhost:6379. Connection refused.")

    def _evict(self, key: str) -> None:
        deadline = self._expires_at.get(key)
        if deadline is not None and deadline <= time.monotonic():
            self._data.pop(key, None)
            self._expires_at.pop(key, None)

    async def ping(self) -> bool:
        self._check()
        return True

    async def get(self, key: str) -> str | None:
        self._check()
        self._evict(key)
        return self._data.get(key)

    async def set(self, key: str, value: str, ex: int | None = None) -> bool:
        self._check()
        self._data[key] = value
        if ex is None:
            self._expires_at.pop(key, None)
        else:
            self._expires_at[key] = time.monotonic() + ex
        return True

    async def delete(self, *keys: str) -> int:
        self._check()
        removed = 0
        for key in keys:
            self._expires_at.pop(key, None)
            if self._data.pop(key, None) is not None:
                removed += 1
        return removed

    async def ttl(self, key: str) -> int:
        self._check()
        self._evict(key)
        if key not in self._data:
            return -2
        if key not in self._expires_at:
            return -1
        return math.ceil(self._expires_at[key] - time.monotonic())

    async def aclose(self) -> None:
        self.closed = True


@asynccontextmanager
async def serve(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    # httpx's ASGITransport does not run the lifespan; drive it explicitly.
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            yield client


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # Backend settings from the developer's shell must not leak into tests.
    for name in (
        "DB_URL", "DB_HOST", "DB_PORT", "DB_NAME", "DB_USER", "DB_PASSWORD",
        "REDIS_URL", "REDIS_HOST", "REDIS_PORT", "API_PORT", "ENV",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        env="test",
        log_level="WARNING",
        db_url=f"sqlite+aiosqlite:///{tmp_path / 'todos.db'}",
    )


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()


@pytest_asyncio.fixture
async def storage(settings: Settings) -> AsyncIterator[StorageClient]:
    client = StorageClient.from_settings(settings)
    await client.init_schema()
    try:
        yield client
    finally:
        await client.dispose()


@pytest_asyncio.fixture
async def unreachable_storage() -> AsyncIterator[StorageClient]:
    client = StorageClient(create_async_engine(UNREACHABLE_DB_URL))
    try:
        yield client
    finally:
        await client.dispose()


@pytest.fixture
def app(settings: Settings, fake_redis: FakeRedis) -> FastAPI:
    return create_app(settings=settings, cache=CacheClient(fake_redis))


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    async with serve(app) as c:
        yield c


# --- Module Notes -----------------------------------------------------------
# Each test gets its own SQLite file and FakeRedis; nothing is shared between tests.
