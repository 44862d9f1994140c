"""
Structured logging configuration using structlog.

The library only emits events; applications decide how they are rendered
by calling :func:`setup_logging`. Until then structlog's defaults apply.
"""

import logging
from typing import Optional

import structlog

from .config import settings


def setup_logging(level: Optional[str] = None, json: Optional[bool] = None) -> None:
    """
    Configure structlog for the library's advisory events.

    Args:
        level: Minimum log level name (defaults to ``settings.log_level``)
        json: Render JSON lines instead of console output (defaults to ``settings.log_json``)
    """
    level = level or settings.log_level
    render_json = settings.log_json if json is None else json

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            (
                structlog.processors.JSONRenderer()
                if render_json
                else structlog.dev.ConsoleRenderer()
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a logger instance with the given name.

    Args:
        name: Logger name (usually __name__)

    Returns:
        structlog BoundLogger instance
    """
    return structlog.get_logger(name)
