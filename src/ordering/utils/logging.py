"""Logging configuration for the drink ordering service.

Output goes through a standard library stream handler; structlog renders the
key/value events the domain emits. The running environment, taken from
``ENV``, ``ENVIRONMENT`` or ``PROTEAN_ENV`` (first one set wins), decides both
the default level and whether events are rendered as JSON or for a console.
"""

import logging
import os
import sys
from typing import Any

import structlog

DEFAULT_LEVELS = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}
JSON_ENVIRONMENTS = ("production", "staging")
QUIET_LOGGERS = ("protean", "uvicorn.access", "asyncio")


def current_environment() -> str:
    for name in ("ENV", "ENVIRONMENT", "PROTEAN_ENV"):
        value = os.getenv(name)
        if value:
            return value.lower()
    return "development"


def get_log_level() -> str:
    """Level from ``LOG_LEVEL``, else the environment's default."""
    default = DEFAULT_LEVELS.get(current_environment(), "INFO")
    return os.getenv("LOG_LEVEL", default).upper()


def renders_json() -> bool:
    return current_environment() in JSON_ENVIRONMENTS


def setup_stdlib_logging(level: str) -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def setup_structlog(json_output: bool) -> None:
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging() -> None:
    """Configure stdlib and structlog logging for the process."""
    setup_stdlib_logging(get_log_level())
    setup_structlog(renders_json())


def add_context(**kwargs: Any) -> None:
    """Bind values that every following log event in this context carries."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
