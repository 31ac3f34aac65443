"""Logging setup for the docmark CLI.

stdout carries only the generated document, so every log record goes to
stderr.
"""

import sys

from loguru import logger

_VERBOSE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
_QUIET_FORMAT = "<level>{message}</level>"


def setup_logging(verbose: bool = False) -> None:
    """Replace loguru's default handler with a single stderr sink."""
    logger.remove()
    if verbose:
        logger.add(sys.stderr, level="DEBUG", format=_VERBOSE_FORMAT)
    else:
        logger.add(sys.stderr, level="WARNING", format=_QUIET_FORMAT)
