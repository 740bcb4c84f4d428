"""
todo_service.db.init_db

Schema bootstrap.

Responsibilities:
- Create the `todos` table if it does not exist (run once at startup).
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from todo_service.db import models  # noqa: F401  # registers tables on Base.metadata
from todo_service.db.base import Base


async def init_db(engine: AsyncEngine) -> None:
    """
    Idempotent: `create_all` checks for existing tables first (CREATE TABLE IF NOT EXISTS
    semantics), so restarting against a populated database is safe.
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
