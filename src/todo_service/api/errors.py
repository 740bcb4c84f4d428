"""
todo_service.api.errors

Exception handlers mapping failures to JSON error bodies.

Responsibilities:
- Render `ServiceError` subclasses as `{"error", "message"}` with their status.
- Render request validation failures in the same shape, plus per-field detail.
- Log every mapped failure; keep internal detail out of response bodies.
- Unexpected exceptions are handled by `RequestContextMiddleware`, not here.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from todo_service.errors import ServiceError, error_body
from todo_service.observability.logging import get_logger

log = get_logger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
        if exc.status_code >= 500:
            log.error("request_failed", error=exc.name, message=exc.message)
        else:
            log.warning("request_rejected", error=exc.name, message=exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.name, exc.message),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        detail = []
        for error in exc.errors():
            loc = [str(part) for part in error.get("loc", ()) if part != "body"]
            detail.append({"field": ".".join(loc), "message": error.get("msg", "")})
        log.warning("request_rejected", error="ValidationError", detail=detail)
        return JSONResponse(
            status_code=422,
            content=error_body("ValidationError", "Request validation failed", detail=detail),
        )
