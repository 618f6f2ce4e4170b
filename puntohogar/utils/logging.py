"""
Logging Configuration

Setup consistent logging across all Punto Hogar modules.
"""

import logging
import sys
from pathlib import Path
from typing import Optional
from logging.handlers import RotatingFileHandler

ROOT_LOGGER_NAME = "puntohogar"

# Per-request access lines from the dev server
QUIET_LOGGERS = ("werkzeug",)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    max_size_mb: int = 10,
    backup_count: int = 5
) -> logging.Logger:
    """
    Configure logging for the listing service.

    Handlers go on the "puntohogar" logger, so every module logger created
    with logging.getLogger(__name__) inherits them. The dev server's access
    log is held at WARNING unless the level is DEBUG.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Path to log file (optional)
        max_size_mb: Max log file size before rotation
        backup_count: Number of backup files to keep

    Returns:
        Configured logger
    """
    log_level = getattr(logging, str(level).upper(), logging.INFO)
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(log_level)

    quiet_level = log_level if log_level <= logging.DEBUG else max(log_level, logging.WARNING)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)

    # Clear existing handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler (if specified)
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_size_mb * 1024 * 1024,
            backupCount=backup_count
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger

