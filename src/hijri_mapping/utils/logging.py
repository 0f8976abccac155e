"""Logging configuration for the Hijri regional mapping engine."""

import logging
import sys
from typing import Any, Optional, TextIO

import structlog
from structlog.stdlib import BoundLogger, LoggerFactory

from hijri_mapping.config import get_settings


def setup_logging(
    log_level: Optional[str] = None, stream: Optional[TextIO] = None
) -> None:
    """Configure structured logging for the application.

    Args:
        log_level: Overrides the configured level
        stream: Output stream, stdout by default
    """
    settings = get_settings()
    level = (log_level or settings.log_level).upper()

    # Configure standard library logging
    logging.basicConfig(
        format="%(message)s",
        stream=stream or sys.stdout,
        level=getattr(logging, level),
    )

    # Configure structlog
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            render_processor(),
        ],
        context_class=dict,
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def render_processor() -> Any:
    """Choose renderer based on configuration."""
    settings = get_settings()

    if settings.log_format == "json":
        return structlog.processors.JSONRenderer()
    else:
        return structlog.dev.ConsoleRenderer()


def get_logger(name: str) -> BoundLogger:
    """Get a configured logger instance."""
    bound_logger: BoundLogger = structlog.get_logger(name)
    return bound_logger
