"""
Structured logging for the books service.

Every line is JSON with the service name, an ISO timestamp and whatever
the handler binds through ``structlog.contextvars`` (the Lambda request id).
"""

import logging
import sys
import time

import structlog


def configure_logging(service_name: str, level: str = "INFO") -> None:
    """
    Configure stdlib logging and structlog for the Lambda process.

    Args:
        service_name: Value of the ``service`` key on every log line
        level: Minimum log level name (e.g. "INFO", "DEBUG")
    """
    # The Lambda runtime ships stdout lines to CloudWatch as-is
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _add_service_name(service_name),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def _add_service_name(service_name: str):
    def processor(logger, method_name, event_dict):
        event_dict["service"] = service_name
        return event_dict

    return processor


class Timer:
    """Measures a store round-trip for the ``duration_ms`` log field."""

    def __init__(self):
        self._start: float = 0
        self._end: float = 0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *args) -> None:
        self._end = time.perf_counter()

    @property
    def duration_ms(self) -> float:
        return round((self._end - self._start) * 1000, 2)
