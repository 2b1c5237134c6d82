"""structlog setup for applications embedding renocost.

The library modules only call ``structlog.get_logger``; nothing is configured
on import. Host applications (or tests) call :func:`configure_logging` once.
"""

import logging
from typing import Optional

import structlog

from renocost.config.errors import ConfigurationError
from renocost.config.settings import settings

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def configure_logging(level: Optional[str] = None, json_logs: Optional[bool] = None) -> None:
    """Configure structlog processors and the minimum log level.

    Args:
        level: Log level name; defaults to ``settings.log_level``.
        json_logs: Render JSON lines instead of the dev console format;
            defaults to ``settings.log_json``.

    Raises:
        ConfigurationError: If the level name is not a standard logging level.
    """
    level_name = (level or settings.log_level).strip().upper()
    if level_name not in LOG_LEVELS:
        raise ConfigurationError(f"Unknown log level {level_name!r}", setting="log_level")
    use_json = settings.log_json if json_logs is None else json_logs

    renderer = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            LOG_LEVELS[level_name]
        ),
        cache_logger_on_first_use=False,
    )
