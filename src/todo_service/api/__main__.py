"""
todo_service.api.__main__

Entrypoint for running the service via `python -m todo_service.api`
(or the `todo-service` console script).

Responsibilities:
- Load settings, create the app, start uvicorn with structlog handling logs.
"""

from __future__ import annotations

import uvicorn

from todo_service.api.app import create_app
from todo_service.settings import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
