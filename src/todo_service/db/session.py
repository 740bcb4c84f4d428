"""
todo_service.db.session

Async SQLAlchemy engine + session factory helpers.

Responsibilities:
- Create the async engine (connection pool) from settings.
- Create the async sessionmaker with safe defaults.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from todo_service.settings import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    # pool_pre_ping replaces connections the server dropped between requests.
    return create_async_engine(settings.database_url, pool_pre_ping=True)


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False keeps returned rows readable after the session closes.
    return async_sessionmaker(
        bind=engine,
        expire_on_commit=False,
        autoflush=False,
    )
