"""Centralized logging configuration for agilecore.

Every engine module logs through ``logging.getLogger(__name__)``, so all of
them hang off the ``agilecore`` logger configured here. Where the output
goes, and at which level, comes from Settings (AGILECORE_LOG_* variables).
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from agilecore.config import get_settings

if TYPE_CHECKING:
    from agilecore.config import Settings

ROOT_LOGGER = "agilecore"
LOG_FILE = "agilecore.log"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(settings: Settings | None = None, *, console: bool = True) -> logging.Logger:
    """Configure the agilecore logger from settings.

    Replaces any handlers from an earlier call. A rotating file handler is
    attached only when settings.log_dir is set; the directory is created
    if needed.

    Args:
        settings: Logging settings. Defaults to get_settings().
        console: Whether to also log to stderr.

    Returns:
        The root agilecore logger.
    """
    if settings is None:
        settings = get_settings()

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(settings.log_level)
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = []

    log_path = None
    if settings.log_dir is not None:
        log_dir = Path(settings.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / LOG_FILE
        handlers.append(
            RotatingFileHandler(
                log_path,
                maxBytes=settings.log_max_bytes,
                backupCount=settings.log_backup_count,
                encoding="utf-8",
            )
        )
    if console:
        handlers.append(logging.StreamHandler())

    for handler in handlers:
        handler.setLevel(settings.log_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info("agilecore logging initialized (level=%s, file=%s)", settings.log_level, log_path)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a component, e.g. get_logger("api") -> agilecore.api."""
    if not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
