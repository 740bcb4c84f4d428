"""
todo_service.db

Durable store package (SQLAlchemy async).

Responsibilities:
- ORM schema, engine/session setup, the todo repository and the Storage Client.
"""

# Package marker.
