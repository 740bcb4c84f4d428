"""
tests.test_smoke

Minimal smoke tests: the service boots, answers liveness and readiness checks and tags responses
with a request id.
"""

from __future__ import annotations

import httpx
import pytest
from conftest import serve
from fastapi import FastAPI


@pytest.mark.asyncio
async def test_liveness_and_readiness_endpoints(client: httpx.AsyncClient) -> None:
    r = await client.get("/healthz")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}

    r = await client.get("/readyz")
    assert r.status_code == 200
    assert r.json() == {"status": "ready"}


@pytest.mark.asyncio
async def test_request_id_is_generated_or_propagated(client: httpx.AsyncClient) -> None:
    r = await client.get("/healthz")
    assert r.headers["x-request-id"]

    r = await client.get("/healthz", headers={"x-request-id": "abc-123"})
    assert r.headers["x-request-id"] == "abc-123"


@pytest.mark.asyncio
async def test_unexpected_error_keeps_request_id(app: FastAPI) -> None:
    @app.get("/explode")
    async def explode() -> None:
        raise RuntimeError("boom")

    async with serve(app) as c:
        r = await c.get("/explode", headers={"x-request-id": "req-500"})

    assert r.status_code == 500
    assert r.headers["x-request-id"] == "req-500"
    assert r.json() == {"error": "InternalError", "message": "An unexpected error occurred."}


# --- Module Notes -----------------------------------------------------------
# Backend-specific behaviour lives in the per-component test modules.
