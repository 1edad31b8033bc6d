"""Logging configuration for the travel app.

Everything goes to stdout in one line format. Application modules log under
the ``app`` namespace. SQL statements are only echoed in debug mode.
"""

import logging
import sys

from app.core.config import LogLevel, Settings

APP_LOGGER = "app"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(settings: Settings) -> LogLevel:
    """Effective level: DEBUG when debugging, otherwise the configured one."""
    return "DEBUG" if settings.debug else settings.log_level


def setup_logging(settings: Settings) -> None:
    """Configure application logging from settings.

    Args:
        settings: Provides ``log_level`` and the ``debug`` switch.
    """
    level = resolve_level(settings)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger(APP_LOGGER).setLevel(level)

    # Echo SQL and request lines only while debugging
    noisy_level = logging.INFO if settings.debug else logging.WARNING
    logging.getLogger("sqlalchemy.engine").setLevel(noisy_level)
    logging.getLogger("uvicorn.access").setLevel(noisy_level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger, placing it under the app namespace if it is not already."""
    if name != APP_LOGGER and not name.startswith(f"{APP_LOGGER}."):
        name = f"{APP_LOGGER}.{name}"
    return logging.getLogger(name)
