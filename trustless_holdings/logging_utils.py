"""Mini README: Application-wide logging helpers for Trustless Holdings.

Structure:
    * level_for_environment - maps ``HoldingsSettings.environment`` to a level.
    * configure_root_logger - one-shot helper installing the console handler.
    * get_logger - factory returning module loggers with baseline configuration.

Usage:
    Modules call ``get_logger(__name__)`` at import time. Without an explicit
    level the handler follows the settings: ``HOLDINGS_LOG_LEVEL`` wins, then
    the environment label (debug output in development, warnings only under
    test). Records carry the thread name because saves run on the debounce
    timer thread while ticks run on the host's frame loop.
"""

from __future__ import annotations

import logging
from typing import Optional

from .configuration import get_settings

_LOGGER_INITIALISED = False

_ENVIRONMENT_LEVELS = {
    "development": logging.DEBUG,
    "test": logging.WARNING,
    "testing": logging.WARNING,
    "production": logging.INFO,
}


def level_for_environment(environment: str, override: Optional[str] = None) -> int:
    """Return the logging level for an environment label or explicit override."""

    if override:
        level = logging.getLevelName(override.strip().upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level '{override}'.")
        return level
    return _ENVIRONMENT_LEVELS.get(environment.strip().lower(), logging.INFO)


def configure_root_logger(level: Optional[int] = None) -> None:
    """Attach the console handler to the root logger once."""

    global _LOGGER_INITIALISED
    if _LOGGER_INITIALISED:
        return

    if level is None:
        settings = get_settings()
        level = level_for_environment(settings.environment, settings.log_level)

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s (%(threadName)s) - %(message)s",
            datefmt="%H:%M:%S",
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
