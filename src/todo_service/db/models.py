"""
todo_service.db.models

Durable schema.

Responsibilities:
- Define the `todos` table: generated integer id, non-null title,
  completed flag (default false), insertion timestamp (default now).
"""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import Boolean, DateTime, Integer, Text, false, func
from sqlalchemy.orm import Mapped, mapped_column

from todo_service.db.base import Base


def _utcnow() -> datetime:
    # Naive UTC with microseconds; newest-first ordering needs sub-second resolution.
    return datetime.now(UTC).replace(tzinfo=None)


class Todo(Base):
    __tablename__ = "todos"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    completed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=_utcnow, server_default=func.now(), index=True
    )

    # AUTOINCREMENT keeps SQLite ids monotonic after deletes, as SERIAL does on PostgreSQL.
    __table_args__ = {"sqlite_autoincrement": True}

    def __repr__(self) -> str:
        return f"Todo(id={self.id!r}, title={self.title!r}, completed={self.completed!r})"


# --- Module Notes -----------------------------------------------------------
# Server defaults mirror the Python defaults so rows inserted outside the service
# (psql, fixtures) still satisfy the same contract.
