"""
todo_service.observability.logging

Structured logging for the todo service.

Responsibilities:
- Route structlog events through stdlib logging at the configured `LOG_LEVEL`.
- Render JSON lines outside dev, and a readable console format in dev.
- Silence uvicorn's access logger; `RequestContextMiddleware` writes the access line
  with the request id instead.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

# Loggers whose output would duplicate ours or drown it at INFO.
_QUIETED_LOGGERS = ("uvicorn.access", "aiosqlite", "asyncio")


def configure_logging(*, service_name: str, level: str, json_logs: bool = True) -> None:
    """
    `level` is the `Settings.log_level` string; unknown names fall back to INFO.
    Events below it are dropped by `filter_by_level` before any rendering work.
    """

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(format="%(message)s", stream=sys.stdout)
    # basicConfig is a no-op once handlers exist; the level still follows each call.
    logging.getLogger().setLevel(numeric_level)
    for name in _QUIETED_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))

    renderer: Any = (
        structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _bind_service(service_name),
            structlog.processors.dict_tracebacks if json_logs else _passthrough,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _bind_service(service_name: str):
    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor


def _passthrough(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    # ConsoleRenderer formats exc_info itself.
    return event_dict


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
