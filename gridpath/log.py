"""
Logging setup for the command-line tools. Library modules only emit through
loguru's logger and never add sinks themselves.
"""

import sys
from loguru import logger


def setup_logger(level: str = "INFO"):
    """
    Replace loguru's default sink with a coloured stderr sink.

    Args:
        level: minimum level to emit (DEBUG shows every expanded node)
    """
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
               "<level>{level: <8}</level> | "
               "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
               "<level>{message}</level>",
        level=level.upper(),
        colorize=True,
    )
    return logger
