"""
Centralized logging configuration.

The outcome helpers never log; this module is for applications and the
pipeline runner built on top of them.
"""

import logging
import sys
from typing import Optional
from pathlib import Path

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(
    level: str = 'INFO',
    format_string: Optional[str] = None,
    log_file: Optional[str] = None
) -> None:
    """
    Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string (uses default if None)
        log_file: Optional log file path
    """
    if format_string is None:
        format_string = DEFAULT_FORMAT

    # Unknown level names fall back to INFO
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers = [logging.StreamHandler(sys.stdout)]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format=format_string,
        handlers=handlers,
        force=True
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def configure_from_settings(settings) -> None:
    """
    Configure logging from settings object.

    Args:
        settings: Settings object with log_level, log_format and log_file
    """
    setup_logging(
        level=settings.log_level,
        format_string=settings.log_format,
        log_file=settings.log_file
    )
