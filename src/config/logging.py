"""Structured logging configuration using structlog.

Booking services bind ``booking_id`` into structlog's context variables
while a booking is enriched and stored, so every event emitted in that
scope is tagged with it without passing it to each log call.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from pythonjsonlogger import jsonlogger

from src.config.settings import settings

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def add_booking_id_prefix(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Add [BOOKING_ID] prefix to log message if booking_id is present.

    Runs after context variables are merged, so a ``booking_id`` bound with
    ``structlog.contextvars`` is picked up as well as one passed explicitly.

    Args:
        logger: The logger instance
        method_name: The name of the method being called
        event_dict: The event dictionary containing log data

    Returns:
        Modified event dictionary with booking id prefix
    """
    booking_id = event_dict.get("booking_id")
    if booking_id:
        event_dict["event"] = f"[{booking_id}] {event_dict.get('event', '')}"
    return event_dict


def _build_handler(log_format: str, log_level: int) -> logging.Handler:
    """Create the stdout handler for the given output format."""
    handler = logging.StreamHandler(sys.stdout)
    if log_format == "json":
        handler.setFormatter(jsonlogger.JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    handler.setLevel(log_level)
    return handler


def configure_logging(
    level: Optional[str] = None,
    log_format: Optional[str] = None,
    cache_loggers: bool = True,
) -> None:
    """Configure stdlib logging and structlog for the booking services.

    Args:
        level: Log level name. Defaults to ``settings.logging.level``.
        log_format: ``json`` or ``console``. Defaults to ``settings.logging.format``.
        cache_loggers: Cache bound loggers on first use.
    """
    level = level or settings.logging.level
    log_format = log_format or settings.logging.format
    log_level = getattr(logging, level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(_build_handler(log_format, log_level))

    renderer = (
        structlog.processors.JSONRenderer()
        if log_format == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            add_booking_id_prefix,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=cache_loggers,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance.

    Args:
        name: Logger name, typically __name__

    Returns:
        Configured logger instance
    """
    return structlog.get_logger(name)
