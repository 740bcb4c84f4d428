"""
todo_service.api.app

FastAPI app factory for the todo service.

Responsibilities:
- Build the FastAPI application and register routers/middleware/exception handlers.
- Create, initialize and dispose the Storage and Cache clients in the lifespan.
- Provide the single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from todo_service import __version__
from todo_service.api.errors import register_exception_handlers
from todo_service.api.routers.cache import router as cache_router
from todo_service.api.routers.health import router as health_router
from todo_service.api.routers.todos import router as todos_router
from todo_service.cache.client import CacheClient
from todo_service.db.client import StorageClient
from todo_service.observability.logging import configure_logging, get_logger
from todo_service.observability.middleware import RequestContextMiddleware
from todo_service.settings import Settings

log = get_logger(__name__)


def create_app(
    *,
    settings: Settings,
    storage: StorageClient | None = None,
    cache: CacheClient | None = None,
) -> FastAPI:
    """
    `storage` and `cache` default to clients built from `settings`; tests pass their own.
    Whichever clients are used, the lifespan owns their startup and shutdown.
    """

    # JSON for shipping everywhere except a developer terminal.
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        json_logs=settings.env != "dev",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info(
            "startup",
            env=settings.env,
            database_url=settings.masked_database_url,
            cache_configured=settings.cache_url is not None,
        )
        storage_client = storage or StorageClient.from_settings(settings)
        cache_client = cache or CacheClient.from_settings(settings)

        # A broken schema is fatal: the exception aborts startup before traffic is served.
        try:
            await storage_client.init_schema()
        except Exception:
            await storage_client.dispose()
            raise
        # A missing or unreachable cache is not: the client stays disconnected.
        await cache_client.connect()

        app.state.storage = storage_client
        app.state.cache = cache_client
        try:
            yield
        finally:
            await cache_client.close()
            await storage_client.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Todo Service",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(RequestContextMiddleware)
    register_exception_handlers(app)
    app.include_router(health_router, tags=["health"])
    app.include_router(todos_router)
    app.include_router(cache_router)

    return app
