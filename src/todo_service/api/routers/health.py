"""
todo_service.api.routers.health

Health and readiness endpoints.

Responsibilities:
- `/health`: report durable store and cache liveness independently; never fails outward.
- `/healthz`: process liveness, no I/O.
- `/readyz`: readiness gated on the durable store.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

from todo_service.api.deps import cache_dep, storage_dep
from todo_service.cache.client import CacheClient
from todo_service.db.client import StorageClient
from todo_service.errors import StorageUnavailable, error_body
from todo_service.observability.logging import get_logger

router = APIRouter()

log = get_logger(__name__)


def _connected(ok: bool) -> str:
    return "connected" if ok else "disconnected"


@router.get("/health")
async def health(
    storage: StorageClient = Depends(storage_dep),
    cache: CacheClient = Depends(cache_dep),
) -> dict[str, Any]:
    redis_status = _connected(cache.is_ready)
    try:
        db_time = await storage.now()
    except StorageUnavailable as e:
        cause = e.__cause__ or e
        log.error("health_database_failed", error=str(cause))
        return {
            "status": "error",
            "database": "disconnected",
            "redis": redis_status,
            "error": str(cause),
        }
    return {
        "status": "ok",
        "database": "connected",
        "postgres_time": db_time,
        "redis": redis_status,
    }


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz", response_model=None)
async def readyz(storage: StorageClient = Depends(storage_dep)) -> dict[str, str] | JSONResponse:
    try:
        await storage.now()
    except StorageUnavailable as e:
        return JSONResponse(
            status_code=HTTP_503_SERVICE_UNAVAILABLE,
            content=error_body(e.name, e.message),
        )
    return {"status": "ready"}


# --- Module Notes -----------------------------------------------------------
# Kubernetes uses /healthz for liveness and /readyz for traffic gating; /health is
# the human-facing summary of both backends.
