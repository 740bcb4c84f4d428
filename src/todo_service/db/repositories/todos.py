"""
todo_service.db.repositories.todos

Repository for `Todo` rows.

Responsibilities:
- Express each todo operation as one parameterized statement.
- Stay transport-agnostic: no HTTP or error translation here.
"""

from __future__ import annotations

from sqlalchemy import delete, desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from todo_service.db.models import Todo


class TodoRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list(self) -> list[Todo]:
        # Newest first; id breaks ties between rows sharing a timestamp.
        stmt = select(Todo).order_by(desc(Todo.created_at), desc(Todo.id))
        return list((await self._session.scalars(stmt)).all())

    async def create(self, *, title: str, completed: bool) -> Todo:
        stmt = insert(Todo).values(title=title, completed=completed).returning(Todo)
        return (await self._session.scalars(stmt)).one()

    async def update(self, todo_id: int, *, title: str, completed: bool) -> Todo | None:
        stmt = (
            update(Todo)
            .where(Todo.id == todo_id)
            .values(title=title, completed=completed)
            .returning(Todo)
            .execution_options(synchronize_session=False)
        )
        return (await self._session.scalars(stmt)).one_or_none()

    async def delete(self, todo_id: int) -> int:
        result = await self._session.execute(delete(Todo).where(Todo.id == todo_id))
        return result.rowcount
