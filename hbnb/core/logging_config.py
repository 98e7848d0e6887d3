"""
Logging configuration for the HBnB core.

Every module logs through ``logging.getLogger(__name__)``; this helper
installs a single stream handler on the package logger so that callers
embedding the core get readable output without touching the root logger.

Typical usage::

    from hbnb.core.logging_config import configure_logging

    log = configure_logging()
    log.info("HBnB core ready")
"""
import logging
from typing import Optional

from hbnb.core.config import get_settings

DEFAULT_LOGGER_NAME = "hbnb"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _parse_level(value: Optional[str]) -> int:
    """Map a level name like 'debug' to its logging constant (INFO if unknown)."""
    if not value:
        return logging.INFO
    level = getattr(logging, value.strip().upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: Optional[str] = None, force: bool = False) -> logging.Logger:
    """
    Initialize the package logger and return it.

    Args:
        level: Level name; defaults to the LOG_LEVEL setting.
        force: Replace an already installed handler.

    Returns:
        The ``hbnb`` logger.
    """
    logger = logging.getLogger(DEFAULT_LOGGER_NAME)
    logger.setLevel(_parse_level(level or get_settings().log_level))

    if logger.handlers and not force:
        return logger

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
