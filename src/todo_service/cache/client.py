"""
todo_service.cache.client

Cache Client: the only way handlers reach the cache store.

Responsibilities:
- Own the single named Redis connection and its `CacheState` flag.
- Guard every key/value operation on the `ready` state.
- Degrade instead of failing when the cache is absent or unreachable.
"""

from __future__ import annotations

import enum
from typing import Any

from redis.asyncio import Redis
from redis.exceptions import RedisError

from todo_service.errors import CacheUnavailable
from todo_service.observability.logging import get_logger
from todo_service.settings import Settings

log = get_logger(__name__)


class CacheState(enum.StrEnum):
    disconnected = "disconnected"
    connecting = "connecting"
    ready = "ready"


class CacheClient:
    """
    State transitions:
    - disconnected -> connecting: `connect()` starts the handshake
    - connecting -> ready: the handshake PING succeeded
    - connecting -> disconnected: the handshake failed (logged, non-fatal)
    - any -> disconnected: `close()`

    A client built without a Redis handle (no endpoint configured) stays disconnected.
    """

    def __init__(self, redis: Redis | None = None) -> None:
        self._redis = redis
        self._state = CacheState.disconnected

    @classmethod
    def from_settings(cls, settings: Settings) -> CacheClient:
        url = settings.cache_url
        if url is None:
            return cls()
        return cls(Redis.from_url(url, decode_responses=True, client_name=settings.service_name))

    @property
    def state(self) -> CacheState:
        return self._state

    @property
    def configured(self) -> bool:
        return self._redis is not None

    @property
    def is_ready(self) -> bool:
        return self._state is CacheState.ready

    async def connect(self) -> CacheState:
        if self._redis is None:
            log.warning("cache_disabled", reason="no cache endpoint configured")
            return self._state

        self._state = CacheState.connecting
        log.info("cache_connecting")
        try:
            await self._redis.ping()
        except (RedisError, OSError) as e:
            self._state = CacheState.disconnected
            log.warning("cache_connect_failed", error=str(e))
            return self._state

        self._state = CacheState.ready
        log.info("cache_ready")
        return self._state

    async def close(self) -> None:
        self._state = CacheState.disconnected
        if self._redis is not None:
            await self._redis.aclose()

    async def probe(self) -> dict[str, Any]:
        if not self.is_ready:
            return {"status": "disconnected"}
        try:
            reply = await self._redis.ping()
        except (RedisError, OSError) as e:
            log.warning("cache_probe_failed", error=str(e))
            return {"status": "disconnected"}
        # redis-py turns the PONG reply into True.
        return {"status": "connected", "ping": "PONG" if reply is True else reply}

    async def get(self, key: str) -> str | None:
        redis = self._require_ready()
        try:
            return await redis.get(key)
        except (RedisError, OSError) as e:
            raise self._backend_failure("get", e) from e

    async def set(self, key: str, value: str, ttl: int | None = None) -> None:
        redis = self._require_ready()
        # SET ... EX writes the value and its expiry atomically.
        expire = ttl if ttl is not None and ttl > 0 else None
        try:
            await redis.set(key, value, ex=expire)
        except (RedisError, OSError) as e:
            raise self._backend_failure("set", e) from e

    async def delete(self, key: str) -> None:
        redis = self._require_ready()
        try:
            await redis.delete(key)
        except (RedisError, OSError) as e:
            raise self._backend_failure("delete", e) from e

    async def ttl(self, key: str) -> int:
        """Remaining lifetime in seconds; -1 when the key never expires, -2 when absent."""
        redis = self._require_ready()
        try:
            return await redis.ttl(key)
        except (RedisError, OSError) as e:
            raise self._backend_failure("ttl", e) from e

    def _require_ready(self) -> Redis:
        if not self.is_ready or self._redis is None:
            raise CacheUnavailable()
        return self._redis

    def _backend_failure(self, operation: str, exc: Exception) -> CacheUnavailable:
        log.error("cache_operation_failed", operation=operation, error=str(exc))
        return CacheUnavailable(f"cache {operation} failed")


# --- Module Notes -----------------------------------------------------------
# Transport errors during a guarded operation do not flip the state flag: redis-py
# re-dials on the next command, and `probe()` reports the live status.
