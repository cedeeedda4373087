"""
Logging configuration for jwtguard.

Provides console logging with time-only timestamps and [TAG] prefixed messages.
"""

import logging
import sys

from jwtguard.settings import get_log_level


def setup_logger(name: str = "jwtguard", level: int = logging.INFO) -> logging.Logger:
    """
    Set up logger with custom formatting.

    Args:
        name: Logger name (default: "jwtguard")
        level: Logging level (default: INFO)

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        logger.setLevel(level)

        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)

        # Format: HH:MM:SS [LEVEL] message
        formatter = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(message)s',
            datefmt='%H:%M:%S'
        )
        handler.setFormatter(formatter)

        logger.addHandler(handler)

    return logger


def truncate_text(text: str, max_length: int = 16) -> str:
    """
    Truncate text to specified length for logging.

    Raw tokens are bearer credentials; only a short prefix should
    ever reach the logs.

    Args:
        text: Text to truncate
        max_length: Maximum length (default: 16)

    Returns:
        str: Truncated text with ellipsis if needed
    """
    if not text:
        return ""

    clean_text = " ".join(text.split())

    if len(clean_text) <= max_length:
        return clean_text

    return clean_text[:max_length] + "..."


# Global logger instance, level taken from LOG_LEVEL
logger = setup_logger(level=get_log_level())
