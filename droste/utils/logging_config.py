# droste/utils/logging_config.py
"""
Centralized logging configuration for the editor process.
This should be imported and called only once at application startup.
"""

import logging
import os
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from typing import Optional

# Global flag to track if logging has been configured
_logging_configured = False


def setup_logging(log_level: int = logging.INFO,
                  log_dir: Optional[str] = None) -> logging.Logger:
    """
    Configure logging for the entire application.

    Args:
        log_level: Console logging level (default: logging.INFO)
        log_dir: Directory for log files; defaults to ``logs`` in the working directory

    Returns:
        Configured root logger
    """
    global _logging_configured

    if _logging_configured:
        return logging.getLogger()

    if log_dir is None:
        log_dir = os.path.join(os.getcwd(), 'logs')
    os.makedirs(log_dir, exist_ok=True)

    current_date = datetime.now().strftime("%Y-%m-%d")
    log_file = os.path.join(log_dir, f"droste_{current_date}.log")

    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)

    # Rotating file handler keeps everything down to DEBUG
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    # Clear existing handlers to prevent duplicate logging
    logger.handlers.clear()
    logger.addHandler(console_handler)
    logger.addHandler(file_handler)

    logger.info("Logging system initialized")
    _logging_configured = True

    return logger
