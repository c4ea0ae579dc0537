"""Loguru logging configuration for linkextractor.

The package only emits records; it does not install handlers. Records are
disabled on import, as is customary for libraries using Loguru. Call
configure_logging() from an application to see them.
"""
import sys
from typing import Optional

from loguru import logger

from linkextractor.config.settings import settings

PACKAGE = "linkextractor"

VALID_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
    "<level>{message}</level>"
)

logger.disable(PACKAGE)


def configure_logging(
    log_level: Optional[str] = None,
    enable_json: Optional[bool] = None,
) -> None:
    """
    Configure Loguru logging for the extractor.

    This function:
    1. Removes the default Loguru handler
    2. Adds a stderr handler, formatted or JSON
    3. Enables records from this package

    Args:
        log_level: Log level (TRACE .. CRITICAL). Defaults to settings.LOGGING.LEVEL.
        enable_json: Emit JSON records. Defaults to settings.LOGGING.JSON.

    Example:
        from linkextractor.config.log_config import configure_logging

        configure_logging(log_level="DEBUG")
    """
    if log_level is None:
        log_level = settings.LOGGING.LEVEL
    log_level = log_level.upper()
    if log_level not in VALID_LEVELS:
        log_level = "INFO"

    if enable_json is None:
        enable_json = settings.LOGGING.JSON

    logger.remove()
    if enable_json:
        logger.add(sys.stderr, level=log_level, serialize=True)
    else:
        logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT, colorize=True)

    logger.enable(PACKAGE)


def get_logger(component: str):
    """
    Returns the package logger bound to a component name.
    """
    return logger.bind(component=component)
