"""Loguru logging configuration.

Call setup_logging() once at application startup to configure the sink.
All other modules simply do `from loguru import logger` and log normally.
"""

import sys

from loguru import logger


def setup_logging(level: str = "WARNING") -> None:
    """Replace loguru's default handler with a single stderr sink.

    Args:
        level: Minimum log level (default WARNING, so the interactive
            session stays quiet unless asked otherwise).
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
    )
