"""
Utility functions for logging
"""

import logging
import sys

from .config import LOGS_DIR, LOG_FORMAT, LOG_DATE_FORMAT, LOG_LEVEL, PACKAGE_LOG_LEVEL

# ==================== LOGGING SETUP ====================

def setup_logger(name: str, log_file: str = None, level: int = LOG_LEVEL):
    """
    Setup logger with console and file handlers.

    Args:
        name: Logger name
        log_file: Name of a log file inside LOGS_DIR (optional)
        level: Logging level

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear()

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_formatter = logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT)
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    # File handler
    if log_file:
        LOGS_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(LOGS_DIR / log_file, mode='a')
        file_handler.setLevel(level)
        file_formatter = logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger

# Create default logger
logger = setup_logger('drama_detection', level=PACKAGE_LOG_LEVEL)
