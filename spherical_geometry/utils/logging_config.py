"""
Structured logging configuration using structlog.

The geometry functions only log rare numerical events (stability fallbacks,
unsolvable inputs, empty paths) at debug level. Applications embedding the
library decide how those events are rendered: human-readable console output
for development or JSON lines for production.
"""
import sys
import logging
import structlog
from pathlib import Path
from typing import Optional


# Used while the host application has not configured structlog: events go
# through stdlib logging, so its level (WARNING by default) applies.
_STDLIB_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.KeyValueRenderer(key_order=["event"]),
]


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    json_output: bool = False
):
    """
    Configure structured logging for an application using the library.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path that receives a copy of every log line
        json_output: If True, render JSON lines; else human-readable console

    Example:
        >>> from spherical_geometry.utils.logging_config import configure_logging, get_logger
        >>> configure_logging(log_level="DEBUG", json_output=True)
        >>> logger = get_logger(__name__)
        >>> logger.debug("interpolate_fallback", angle=4.1e-07)
    """
    level = getattr(logging, log_level.upper())

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(level)

    # filter_by_level first: debug calls in numeric code paths stop here
    # when DEBUG is disabled, before any rendering work.
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter('%(message)s'))
        logging.getLogger().addHandler(file_handler)


def get_logger(name: str):
    """
    Get a structured logger instance.

    Resolve the logger where the event is emitted rather than at import
    time, so a later configure_logging() call takes effect.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Structured logger with bound context

    Example:
        >>> get_logger(__name__).debug("offset_origin_no_solution", discriminant=-0.23)
    """
    if structlog.is_configured():
        return structlog.get_logger(name)
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_STDLIB_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )
