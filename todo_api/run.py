"""Entry point for running the todo API server."""

import logging

import uvicorn

from todo_api.logging_utils import configure_logging
from todo_api.settings import get_settings

logger = logging.getLogger(__name__)


def log_startup(host: str, port: int, backend: str) -> None:
    """Log a single startup line for process managers."""
    logger.info("Starting on %s:%s (STORAGE_BACKEND=%s)", host, port, backend)


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    log_startup(settings.host, settings.port, settings.storage_backend)
    uvicorn.run(
        "todo_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
