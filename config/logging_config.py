"""
Logging configuration helpers and shared logger instance
"""

import logging
import logging.handlers
import sys
from pathlib import Path

from config.settings import settings

# Client libraries that log every request at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "openai")

def _quiet_third_party() -> None:
    """Raise noisy client libraries to WARNING unless we are debugging"""
    if settings.log_level == "DEBUG":
        return
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

def setup_logger(name: str = "sentiment-dashboard") -> logging.Logger:
    """
    Configure and return a named logger with console and optional file output

    Configuration is loaded from settings (LOG_LEVEL, LOG_TO_FILE, LOG_FILE_*)

    Args:
        name: Logger name (default 'sentiment-dashboard')

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        logger.setLevel(getattr(logging, settings.log_level, logging.INFO))

        formatter = logging.Formatter(
            fmt=settings.log_format,
            datefmt=settings.log_date_format
        )

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if settings.log_to_file:
            log_path = Path(settings.log_file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.handlers.TimedRotatingFileHandler(
                filename=log_path,
                when=settings.log_file_rotation,
                interval=1,
                backupCount=settings.log_file_retention,
                encoding="utf-8"
            )
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        _quiet_third_party()

    logger.propagate = False
    return logger

logger = setup_logger()
