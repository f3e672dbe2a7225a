"""Structured logging setup.

Domain modules log through ``structlog.get_logger()`` and never configure
anything themselves. Whatever embeds the domain calls
``configure_logging()`` once at startup.

Environment:
    STOREFRONT_LOG_LEVEL  level name, default WARNING
    STOREFRONT_LOG_JSON   "1"/"true"/"yes" renders JSON instead of console output
"""

from __future__ import annotations

import logging
import os

import structlog

DEFAULT_LOG_LEVEL = "WARNING"

_TRUTHY = {"1", "true", "yes", "on"}


def configure_logging(level: str | None = None, json_output: bool | None = None) -> str:
    """Configure structlog and return the effective level name.

    Explicit arguments win over the environment.
    """
    level_name = (level or os.getenv("STOREFRONT_LOG_LEVEL", DEFAULT_LOG_LEVEL)).upper()
    level_number = logging.getLevelName(level_name)
    if not isinstance(level_number, int):
        raise ValueError(f"Unknown log level: {level_name!r}")

    if json_output is None:
        json_output = os.getenv("STOREFRONT_LOG_JSON", "").strip().lower() in _TRUTHY

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_number),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
    return level_name
