"""Logging setup for the `cessdk` command.

Library users get no handlers from this package; importing cessdk leaves
their logging untouched. The CLI calls configure_logging() once at startup.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

PACKAGE_LOGGER = "cessdk"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_FILE = "cessdk.log"


def _resolve_level(level: str | int | None) -> int:
    if level is None:
        level = os.environ.get("CES_LOG_LEVEL", "WARNING")
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.WARNING)


def configure_logging(log_dir: Path | None = None, *, level: str | int | None = None) -> logging.Logger:
    """Attach console and optional rotating file handlers to the cessdk logger.

    Args:
        log_dir: Directory for cessdk.log; defaults to CES_LOG_DIR, unset means
            console only
        level: Level name or number; defaults to CES_LOG_LEVEL, then WARNING

    Returns:
        The configured package logger. Calling again replaces its handlers.
    """
    if log_dir is None and os.environ.get("CES_LOG_DIR"):
        log_dir = Path(os.environ["CES_LOG_DIR"])

    resolved = _resolve_level(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(resolved)
    logger.propagate = False

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_dir:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        # 10MB per file, 5 backups
        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / LOG_FILE,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
