"""
Logging setup for the storefront API

Console output always, plus an optional daily rotating file when LOG_FILE
is configured.
"""
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from storefront.core.config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(settings: Settings) -> logging.Logger:
    """
    Configure the "storefront" logger hierarchy.

    Safe to call more than once (e.g. one app per test): handlers are only
    attached the first time.
    """
    logger = logging.getLogger("storefront")
    logger.setLevel(settings.LOG_LEVEL.upper())

    # Avoid duplicate handlers if configure_logging() is called multiple times
    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if settings.LOG_FILE:
        log_file = settings.data_path(settings.LOG_FILE)
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            filename=log_file,
            when="midnight",
            interval=1,
            backupCount=7,
            encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging configured (level=%s)", settings.LOG_LEVEL)
    return logger
