"""
todo_service.db.client

Storage Client: the only way handlers reach the durable store.

Responsibilities:
- Own the async engine (connection pool) and its session factory.
- Run each todo operation as one statement in a short-lived session.
- Translate backend failures into `StorageUnavailable` without poisoning the pool.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from todo_service.db.init_db import init_db
from todo_service.db.models import Todo
from todo_service.db.repositories.todos import TodoRepo
from todo_service.db.session import create_engine, create_sessionmaker
from todo_service.errors import StorageUnavailable, ValidationError
from todo_service.observability.logging import get_logger
from todo_service.settings import Settings

log = get_logger(__name__)


class StorageClient:
    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine
        self._sessions: async_sessionmaker[AsyncSession] = create_sessionmaker(engine)

    @classmethod
    def from_settings(cls, settings: Settings) -> StorageClient:
        log.info("storage_pool_created", database_url=settings.masked_database_url)
        return cls(create_engine(settings))

    async def init_schema(self) -> None:
        # Startup only. Failures propagate so the process refuses to serve.
        try:
            await init_db(self._engine)
        except (SQLAlchemyError, OSError) as e:
            log.error("storage_schema_failed", error=str(e))
            raise
        log.info("storage_schema_ready", table=Todo.__tablename__)

    async def dispose(self) -> None:
        await self._engine.dispose()

    @asynccontextmanager
    async def _session(self, operation: str) -> AsyncIterator[AsyncSession]:
        # One session per operation; the connection goes back to the pool on exit,
        # including after a failure, so later requests are unaffected.
        try:
            async with self._sessions() as session:
                yield session
        except (SQLAlchemyError, OSError) as e:
            log.error("storage_operation_failed", operation=operation, error=str(e))
            raise StorageUnavailable() from e

    async def list_todos(self) -> list[Todo]:
        async with self._session("list_todos") as session:
            todos = await TodoRepo(session).list()
        log.debug("todos_listed", count=len(todos))
        return todos

    async def create_todo(self, title: str | None, completed: bool | None = None) -> Todo:
        title = _require_title(title)
        async with self._session("create_todo") as session:
            todo = await TodoRepo(session).create(title=title, completed=bool(completed))
            await session.commit()
        log.info("todo_created", todo_id=todo.id)
        return todo

    async def update_todo(self, todo_id: int, title: str | None, completed: bool) -> Todo | None:
        title = _require_title(title)
        async with self._session("update_todo") as session:
            todo = await TodoRepo(session).update(todo_id, title=title, completed=completed)
            await session.commit()
        log.info("todo_updated", todo_id=todo_id, found=todo is not None)
        return todo

    async def delete_todo(self, todo_id: int) -> None:
        async with self._session("delete_todo") as session:
            deleted = await TodoRepo(session).delete(todo_id)
            await session.commit()
        log.info("todo_deleted", todo_id=todo_id, deleted=deleted)

    async def now(self) -> datetime:
        """Liveness query: the store's current timestamp."""
        async with self._session("now") as session:
            return (await session.execute(select(func.now()))).scalar_one()


def _require_title(title: str | None) -> str:
    if title is None or not title.strip():
        raise ValidationError("title must be a non-empty string")
    return title


# --- Module Notes -----------------------------------------------------------
# No retries here: pool_pre_ping covers stale connections and anything else is
# reported to the caller as StorageUnavailable for that request only.
