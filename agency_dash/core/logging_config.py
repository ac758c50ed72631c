"""
Centralized Logging Configuration
Console logging plus an optional rotating log file
"""
import logging
import logging.handlers
from pathlib import Path

from agency_dash.core.config import Settings


def setup_logging(settings: Settings) -> logging.Logger:
    """
    Setup application-wide logging

    Args:
        settings: Application settings (LOG_LEVEL, LOG_FORMAT, LOG_FILE)

    Returns:
        The configured root logger
    """
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    formatter = logging.Formatter(settings.LOG_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Clear existing handlers so repeated app creation does not duplicate output
    root_logger.handlers = []

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if settings.LOG_FILE:
        log_path = Path(settings.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Set specific loggers for third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    root_logger.info("Logging initialized at %s level", logging.getLevelName(log_level))
    return root_logger
