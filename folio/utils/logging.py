"""
Structured logging utilities for Folio.

Loggers are structlog loggers bound to the stdlib logging tree, so library
events and third-party stdlib records share one console handler. Nothing is
printed until an application attaches a handler with :func:`setup_logging`.
"""

import logging
import sys
from typing import Any, List, Optional, TextIO

import structlog

_SHARED_PROCESSORS: List[Any] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    structlog.processors.StackInfoRenderer(),
]


def configure_structlog() -> None:
    """Route structlog events into the stdlib logging tree."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def setup_logging(
    level: str = "INFO", structured: bool = True, stream: Optional[TextIO] = None
) -> None:
    """
    Set up logging configuration with structured logging.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        structured: Whether to use structured logging (JSON format).
        stream: Stream for the console handler. Defaults to stdout.

    Raises:
        ValueError: If the log level is invalid.
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if structured:
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_SHARED_PROCESSORS,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            renderer,
        ],
    )

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    configure_structlog()


def get_logger(name: str) -> Any:
    """
    Get a logger with the given name.

    Args:
        name: Logger name.

    Returns:
        structlog logger instance.
    """
    return structlog.stdlib.get_logger(name)


configure_structlog()
logging.getLogger("folio").addHandler(logging.NullHandler())
