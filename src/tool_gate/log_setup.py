"""Loguru sink configuration."""

import sys
from typing import Optional

from loguru import logger

from .config import Config

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> | <level>{message}</level>"
)


def configure_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Replace loguru's default handler with the gateway's sinks.

    Args:
        level: Console log level (defaults to Config.LOG_LEVEL)
        log_file: Optional file sink path (defaults to Config.LOG_FILE)
    """
    level = (level or Config.LOG_LEVEL).upper()
    log_file = log_file if log_file is not None else Config.LOG_FILE

    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level)

    if log_file:
        logger.add(
            log_file,
            rotation=Config.LOG_ROTATION,
            retention=Config.LOG_RETENTION,
            compression="zip",
            level="DEBUG",
        )
