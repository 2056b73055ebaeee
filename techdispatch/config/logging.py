"""
Structured logging for the engine.

Engine modules log through structlog. Hosts call ``configure_logging`` once at
startup; until then structlog's defaults apply.
"""

import logging
import sys
from typing import List, Optional

import structlog

from techdispatch.config.settings import Settings, settings as default_settings


def _processors(app_settings: Settings) -> List:
    renderer = (
        structlog.processors.JSONRenderer()
        if app_settings.ENVIRONMENT == "production"
        else structlog.dev.ConsoleRenderer(colors=app_settings.ENVIRONMENT == "development")
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(app_settings: Optional[Settings] = None) -> None:
    """Configure structured logging from settings."""
    app_settings = app_settings or default_settings

    structlog.configure(
        processors=_processors(app_settings),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, app_settings.LOG_LEVEL),
    )


def dispatch_context(**values):
    """Bind values (day, batch size...) to every log line inside the block."""
    return structlog.contextvars.bound_contextvars(**values)


def get_logger(name: str = None) -> structlog.BoundLogger:
    """Get a structured logger."""
    return structlog.get_logger(name)
