"""structlog configuration for follownet.

Two output modes:
- Human (default): colored console output to stderr
- JSON (log_json): Structured JSON lines to stderr
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from follownet.config.settings import LoggingSettings


def configure_logging(
    settings: LoggingSettings | None = None,
    **overrides: Any,
) -> LoggingSettings:
    """Configure structlog processors and output routing.

    Args:
        settings: Settings to apply. Read from ``FOLLOWNET_*`` environment
            variables when omitted.
        **overrides: Individual ``LoggingSettings`` fields that win over
            *settings* (e.g. ``verbose=True``).

    Returns:
        The settings that were applied.
    """
    if settings is None:
        settings = LoggingSettings(**overrides)
    elif overrides:
        settings = LoggingSettings(**{**settings.model_dump(), **overrides})

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

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

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("follownet").setLevel(settings.app_level)
    for name in settings.quiet_loggers:
        logging.getLogger(name).setLevel(logging.WARNING)
    return settings
