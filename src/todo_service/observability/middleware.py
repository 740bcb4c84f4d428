"""
todo_service.observability.middleware

HTTP middleware for request-scoped logging context.

Responsibilities:
- Generate/propagate request IDs (`x-request-id`) on every response, 500s included.
- Bind request metadata into structlog contextvars.
- Turn unexpected exceptions into a generic 500 body while the request context is bound.
- Emit one access log line per request with status and duration.
"""

from __future__ import annotations

import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from todo_service.errors import error_body
from todo_service.observability.logging import get_logger

REQUEST_ID_HEADER = "x-request-id"

log = get_logger(__name__)


class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=request.url.path,
            method=request.method,
        )
        started = time.perf_counter()
        try:
            try:
                response: Response = await call_next(request)
            except Exception as e:
                # Service errors are handled further in; anything reaching here is a bug.
                log.exception("unhandled_exception", error_type=type(e).__name__)
                response = JSONResponse(
                    status_code=500,
                    content=error_body("InternalError", "An unexpected error occurred."),
                )
            log.info(
                "request_completed",
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
        finally:
            structlog.contextvars.clear_contextvars()

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


# --- Module Notes -----------------------------------------------------------
# Starlette runs `exception_handler(Exception)` outside user middleware, where this
# context is already gone; catching here keeps the request id on 500 responses.
