"""
Structured logging configuration using structlog.
Provides request- and series-scoped logging with automatic context injection.
"""

import logging
import sys
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Iterator

import structlog
from structlog.types import EventDict, Processor

from casetrend.config import get_settings


def add_severity(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add severity level for structured logging."""
    event_dict["severity"] = method_name.upper()
    return event_dict


# Event fields holding epoch-millisecond days
DAY_FIELDS = ("day", "start")


def add_day_dates(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add a UTC ISO date next to each epoch-millisecond day field."""
    for field in DAY_FIELDS:
        value = event_dict.get(field)
        if isinstance(value, int) and not isinstance(value, bool):
            event_dict[f"{field}_date"] = (
                datetime.fromtimestamp(value / 1000, tz=timezone.utc).date().isoformat()
            )
    return event_dict


@contextmanager
def series_context(series_key: str) -> Iterator[None]:
    """
    Bind `series_key` to every log event emitted in this context.

    Worker threads do not inherit context variables; log the key explicitly
    from code submitted to a pool.
    """
    with structlog.contextvars.bound_contextvars(series_key=series_key):
        yield


def configure_logging() -> None:
    """
    Configure structured logging for the application.
    Uses JSON format in production, console format in development.
    """
    settings = get_settings()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
    )

    if settings.log_format == "json" and not settings.dev_mode:
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=not settings.testing)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            add_severity,
            add_day_dates,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = __name__) -> structlog.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)
