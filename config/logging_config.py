"""
Centralized logging configuration.

Handlers live on the package logger ('pageflow'); module loggers are its
children and propagate to it, so a warning raised deep inside the border
tracker ends up on the console and in the rotating log file exactly once.
"""
import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from .constants import (
    LOG_FORMAT, LOG_FILE,
    LOG_MAX_SIZE_MB, LOG_BACKUP_COUNT
)
from .settings import settings

ROOT_LOGGER_NAME = 'pageflow'


def setup_logger(
    name: str = None,
    level: Optional[str] = None,
    log_file: Optional[str] = LOG_FILE,
) -> logging.Logger:
    """
    Configure the package logger once and return the requested logger.

    Usage:
        from config.logging_config import setup_logger
        logger = setup_logger(__name__)
        logger.warning("stop_rect: close rect without start_rect")

    Args:
        name: Logger name. If None, uses 'pageflow'.
        level: Level name for the package logger (defaults to settings.log_level).
        log_file: Rotating log file path; falsy disables the file handler.

    Returns:
        Configured logging.Logger instance.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)

    # Avoid adding handlers multiple times
    if not root.handlers:
        root.setLevel(getattr(logging, (level or settings.log_level).upper()))

        # Console handler - INFO level
        console = logging.StreamHandler()
        console.setLevel(logging.INFO)
        console.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(console)

        # File handler with rotation - DEBUG level
        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=LOG_MAX_SIZE_MB * 1024 * 1024,
                backupCount=LOG_BACKUP_COUNT
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            root.addHandler(file_handler)
    elif level:
        root.setLevel(getattr(logging, level.upper()))

    if not name or name == ROOT_LOGGER_NAME:
        return root
    if not name.startswith(ROOT_LOGGER_NAME + '.'):
        name = f'{ROOT_LOGGER_NAME}.{name}'
    return logging.getLogger(name)


def get_logger(name: str = None) -> logging.Logger:
    """
    Alias for setup_logger for convenience.

    Usage:
        from config.logging_config import get_logger
        logger = get_logger(__name__)
    """
    return setup_logger(name)


# Singleton logger for quick imports
# Usage: from config.logging_config import logger
logger = setup_logger(ROOT_LOGGER_NAME)
