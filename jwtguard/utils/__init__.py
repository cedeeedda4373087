"""
Utility helpers for jwtguard.
"""

from .logger import logger, setup_logger, truncate_text

__all__ = ['logger', 'setup_logger', 'truncate_text']
