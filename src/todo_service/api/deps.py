"""
todo_service.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Hand the process-scoped Storage and Cache clients to routers.
- Encapsulate app.state access patterns.
"""

from __future__ import annotations

from fastapi import Request

from todo_service.cache.client import CacheClient
from todo_service.db.client import StorageClient


def storage_dep(request: Request) -> StorageClient:
    # Created in the lifespan of `todo_service.api.app.create_app`.
    return request.app.state.storage  # type: ignore[attr-defined]


def cache_dep(request: Request) -> CacheClient:
    return request.app.state.cache  # type: ignore[attr-defined]


# --- Module Notes -----------------------------------------------------------
# Tests swap backends through `app.dependency_overrides[storage_dep]` or by passing
# clients to `create_app`.
