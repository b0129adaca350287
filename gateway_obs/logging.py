"""
Structured Logging (structlog).

Every HTTP request, tool dispatch and SSE session event is logged as a
named event with key/value context.
"""

import logging
import sys

import structlog

from gateway_config.settings import Settings


def setup_logging(settings: Settings) -> None:
    """
    Configure structlog for structured logging.

    Output format: JSON (default) or text (dev)
    Every event carries the request_id bound by RequestIDMiddleware, so
    tool dispatch lines (tool, arguments, error) and SSE session lines can
    be joined to the HTTP request that caused them.
    """
    logging.basicConfig(
        format="%(message)s", stream=sys.stdout, level=settings.LOG_LEVEL.upper()
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get configured logger."""
    return structlog.get_logger(name)
