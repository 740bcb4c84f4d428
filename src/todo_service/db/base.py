"""
todo_service.db.base

SQLAlchemy declarative base shared by the ORM models; `init_db` creates
the tables registered on its metadata.
"""

from __future__ import annotations

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
