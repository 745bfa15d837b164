# src/graphload/core/logging.py
"""Structured logging for graphload.

structlog renders every event through the stdlib logging module so that
progress and diagnostics share one format: timestamp, level tag, event,
then key=value pairs.

Routing:
- Records below WARNING go to stdout (progress)
- WARNING and above go to stderr (diagnostics)
"""

import logging
import sys
from typing import Any

import structlog

LOGGER_NAME = "graphload"

_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class _BelowWarning(logging.Filter):
    """Pass only records below WARNING."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def configure_logging(*, debug: bool = False, json_output: bool = False) -> None:
    """Configure structlog and the graphload stdlib logger.

    Safe to call more than once; handlers from a previous call are replaced.
    Streams are bound at call time, so call this after any stdout/stderr
    redirection is in place.

    Args:
        debug: Emit DEBUG records (stage command lines, skip decisions)
        json_output: Render events as JSON lines instead of console text
    """
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt=_TIMESTAMP_FORMAT, utc=False),
    ]

    renderer: Any
    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.addFilter(_BelowWarning())
    stdout_handler.setFormatter(formatter)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)
    stderr_handler.setFormatter(formatter)

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(stdout_handler)
    logger.addHandler(stderr_handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.propagate = False


def get_logger(name: str = LOGGER_NAME) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to a graphload module name."""
    return structlog.get_logger(name)
