"""
tests.test_health

Health Reporter: both backends reported independently, never an HTTP error.
"""

from __future__ import annotations

import httpx
import pytest
from conftest import UNREACHABLE_DB_URL, FakeRedis, serve
from fastapi import FastAPI
from sqlalchemy.exc import SQLAlchemyError

from todo_service.api.app import create_app
from todo_service.api.deps import storage_dep
from todo_service.cache.client import CacheClient
from todo_service.db.client import StorageClient
from todo_service.settings import Settings


@pytest.mark.asyncio
async def test_health_ok_with_both_backends(client: httpx.AsyncClient) -> None:
    r = await client.get("/health")

    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["database"] == "connected"
    assert body["redis"] == "connected"
    assert body["postgres_time"]
    assert "error" not in body


@pytest.mark.asyncio
async def test_health_with_cache_disabled(settings: Settings) -> None:
    async with serve(create_app(settings=settings)) as c:
        body = (await c.get("/health")).json()

    assert body["status"] == "ok"
    assert body["database"] == "connected"
    assert body["redis"] == "disconnected"


@pytest.mark.asyncio
async def test_health_reports_database_down_and_cache_up(
    app: FastAPI, unreachable_storage: StorageClient
) -> None:
    app.dependency_overrides[storage_dep] = lambda: unreachable_storage

    async with serve(app) as c:
        r = await c.get("/health")
        ready = await c.get("/readyz")

    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "error"
    assert body["database"] == "disconnected"
    assert body["redis"] == "connected"
    assert body["error"]
    assert "postgres_time" not in body

    assert ready.status_code == 503
    assert ready.json()["error"] == "StorageUnavailable"


@pytest.mark.asyncio
async def test_todo_routes_return_503_when_database_down(
    app: FastAPI, unreachable_storage: StorageClient
) -> None:
    app.dependency_overrides[storage_dep] = lambda: unreachable_storage

    async with serve(app) as c:
        r = await c.get("/todos")

    assert r.status_code == 503
    assert r.json() == {"error": "StorageUnavailable", "message": "database unavailable"}


@pytest.mark.asyncio
async def test_startup_fails_when_schema_cannot_be_created() -> None:
    settings = Settings(_env_file=None, env="test", log_level="WARNING", db_url=UNREACHABLE_DB_URL)
    app = create_app(settings=settings, cache=CacheClient(FakeRedis()))

    with pytest.raises(SQLAlchemyError):
        async with serve(app):
            pass


# --- Module Notes -----------------------------------------------------------
# /health always answers 200; /readyz and the todo routes surface storage outages as 503.
