"""
Lambda entry point and composition root.

The application (event loop, store client, handler) is built on the first
invocation and reused for the lifetime of the execution environment.
"""

import asyncio
from typing import Any

import structlog

from .config import Settings, settings
from .infrastructure.logging import configure_logging
from .infrastructure.persistence import create_book_store
from .presentation.handlers import GetBookHandler

logger = structlog.get_logger()


class BooksApplication:
    """Wires the shared store into the lookup handler."""

    def __init__(self, app_settings: Settings) -> None:
        configure_logging(app_settings.service_name, app_settings.log_level)
        logger.info("Starting application", service=app_settings.service_name)

        # One loop per process: the store client is bound to it
        self._loop = asyncio.new_event_loop()
        self._store = create_book_store(app_settings)
        self._loop.run_until_complete(self._store.connect())
        self._handler = GetBookHandler(self._store, app_settings.table_name)

    def invoke(self, event: dict[str, Any], context: Any) -> dict[str, Any]:
        response = self._loop.run_until_complete(self._handler.handle(event, context))
        return response.to_proxy()

    def shutdown(self) -> None:
        self._loop.run_until_complete(self._store.close())
        self._loop.close()
        logger.info("Application shutdown complete")


_application: BooksApplication | None = None


def get_application() -> BooksApplication:
    """Get or create the process-wide application."""
    global _application
    if _application is None:
        _application = BooksApplication(settings)
    return _application


def handler(event: dict, context) -> dict:
    """AWS Lambda handler for API Gateway proxy integration."""
    return get_application().invoke(event, context)
