"""Structured logging configuration."""

import logging
import sys

import structlog

from src.core.config import settings


def setup_logging(
    level: str | None = None,
    log_format: str | None = None,
    stream=None,
) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        level: Log level name; defaults to settings.log_level
        log_format: "json" or "console"; defaults to settings.log_format
        stream: Output stream; defaults to stdout
    """
    level_name = (level or settings.log_level).upper()
    renderer_name = (log_format or settings.log_format).lower()
    log_level = logging.getLevelName(level_name)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    logging.basicConfig(
        format="%(message)s",
        stream=stream or sys.stdout,
        level=log_level,
        force=True,
    )

    if renderer_name == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
