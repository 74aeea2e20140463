"""Structured logging configuration using structlog.

Engine, manager and provider modules log through ``logging.getLogger(__name__)``.
``setup_logging`` attaches a structlog ``ProcessorFormatter`` to the
``scout_elasticsearch`` logger so those records are rendered as JSON (or
console) lines carrying the bound search context::

    {"event": "Bulk indexing 2 documents into 'posts'", "driver": "elasticsearch",
     "index": "posts", "logger": "scout_elasticsearch.engines.elasticsearch", ...}
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from scout_elasticsearch.config.settings import ObservabilitySettings

PACKAGE_LOGGER = "scout_elasticsearch"


def setup_logging(settings: ObservabilitySettings | None = None) -> logging.Handler:
    """Configure structured logging for the search engine layer.

    Calling it again replaces the handler installed by the previous call.

    Args:
        settings: Observability settings. Uses defaults if None.

    Returns:
        The handler attached to the package logger.
    """
    log_level = settings.log_level.upper() if settings else "INFO"
    log_format = settings.log_format if settings else "json"

    shared_processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    renderer = structlog.dev.ConsoleRenderer() if log_format == "console" else structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        if isinstance(existing.formatter, structlog.stdlib.ProcessorFormatter):
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, log_level, logging.INFO))
    return handler


def bind_search_context(driver: str, index: str) -> None:
    """Attach the active driver and index to every subsequent log line."""
    structlog.contextvars.bind_contextvars(driver=driver, index=index)
