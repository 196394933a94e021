"""Logging configuration for Ocean Letter Quest."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

from letterquest import config


def setup_logging(
    name: str = "letterquest",
    level: Optional[str] = None,
    log_file: Optional[Path] = None,
    console: bool = False,
) -> logging.Logger:
    """
    Set up logging configuration.

    The game owns the terminal while it runs, so records go to a rotating
    file; a console handler is only attached when asked for. A log file that
    cannot be created is reported on stderr and skipped.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file, defaults to ``LOGS_DIR/<name>.log``
        console: Also log to stderr

    Returns:
        Configured logger instance
    """
    if level is None:
        level = config.LOG_LEVEL
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    # Calling twice must not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.LOG_FORMAT)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file is None:
        log_file = config.LOGS_DIR / f"{name}.log"

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10485760,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
    except OSError as exc:
        sys.stderr.write(f"letterquest: not writing a log file to {log_file}: {exc}\n")
        if not logger.handlers:
            logger.addHandler(logging.NullHandler())
        return logger

    file_handler.setLevel(numeric_level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    return logger
