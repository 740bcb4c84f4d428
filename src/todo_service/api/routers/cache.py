"""
todo_service.api.routers.cache

Pass-through key/value endpoints over the cache store.

Responsibilities:
- Probe cache connectivity without failing.
- Get/set/delete keys; a not-ready cache is an explicit 503 ("cache not connected"),
  never a silent no-op, so a missing key (200, value null) stays distinguishable.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from todo_service.api.deps import cache_dep
from todo_service.api.routers.todos import SuccessResponse
from todo_service.cache.client import CacheClient

router = APIRouter(prefix="/redis", tags=["cache"])


class CacheSetRequest(BaseModel):
    model_config = ConfigDict(strict=True)

    key: str
    value: str
    ttl: int | None = Field(default=None, gt=0, description="Expiry in whole seconds")


class CacheEntryResponse(BaseModel):
    key: str
    value: str | None


# Registered before "/{key}" so the probe path is not read as a key lookup.
@router.get("/test")
async def probe_cache(cache: CacheClient = Depends(cache_dep)) -> dict[str, Any]:
    return await cache.probe()


@router.get("/{key}", response_model=CacheEntryResponse)
async def get_entry(key: str, cache: CacheClient = Depends(cache_dep)) -> CacheEntryResponse:
    return CacheEntryResponse(key=key, value=await cache.get(key))


@router.post("", response_model=SuccessResponse)
async def set_entry(
    body: CacheSetRequest,
    cache: CacheClient = Depends(cache_dep),
) -> SuccessResponse:
    await cache.set(body.key, body.value, ttl=body.ttl)
    return SuccessResponse()


@router.delete("/{key}", response_model=SuccessResponse)
async def delete_entry(key: str, cache: CacheClient = Depends(cache_dep)) -> SuccessResponse:
    await cache.delete(key)
    return SuccessResponse()
