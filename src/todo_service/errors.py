"""
todo_service.errors

Service error taxonomy.

Responsibilities:
- Name the failure classes handlers and clients raise.
- Carry the HTTP status and the public (client-safe) message for each class.
"""

from __future__ import annotations

from typing import Any


def error_body(name: str, message: str, **extra: Any) -> dict[str, Any]:
    # Shared JSON shape of every error response.
    return {"error": name, "message": message, **extra}


class ServiceError(Exception):
    status_code: int = 500
    default_message: str = "internal error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def name(self) -> str:
        return type(self).__name__


class ValidationError(ServiceError):
    # Client input is malformed; raised before any backend I/O.
    status_code = 422
    default_message = "invalid input"


class NotFound(ServiceError):
    status_code = 404
    default_message = "not found"


class StorageUnavailable(ServiceError):
    status_code = 503
    default_message = "database unavailable"


class CacheUnavailable(ServiceError):
    status_code = 503
    default_message = "cache not connected"


# --- Module Notes -----------------------------------------------------------
# Mapping to HTTP responses lives in `todo_service.api.errors`.
