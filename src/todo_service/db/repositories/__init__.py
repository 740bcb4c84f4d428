"""
todo_service.db.repositories

Repository package.

Responsibilities:
- Group session-bound data-access repositories.
"""

# Package marker; repositories are imported directly from submodules.
