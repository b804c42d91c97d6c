"""
Logging configuration for the WaniKani client.

The library logs through loguru's global ``logger`` but keeps its own records
disabled until an application calls ``setup_logging`` once at startup.
"""

import sys
from typing import Optional

from loguru import logger

from ..config import get_settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{module}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def setup_logging(log_level: Optional[str] = None) -> None:
    """
    Set up logging configuration.

    Args:
        log_level: Override log level (DEBUG, INFO, WARNING, ERROR)
    """
    settings = get_settings()

    logger.enable("wanikani_client")

    # Remove default handler
    logger.remove()

    level = (log_level or settings.log_level).upper()
    json_output = settings.log_format == "json"

    logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=level,
        colorize=not json_output,
        serialize=json_output,
        backtrace=settings.debug_mode,
        diagnose=settings.debug_mode,
    )

    logger.info(f"Logging initialized with level: {level}, format: {settings.log_format}")


def get_logger(name: str):
    """
    Get a logger instance for a specific module.

    Args:
        name: Module name

    Returns:
        Logger instance
    """
    return logger.bind(name=name)
