"""
Logging setup (loguru).
"""

import sys

from loguru import logger

from lexilens.config import LOG_LEVEL


LOG_FORMAT = "<green>{time:HH:mm:ss}</green> <level>{level: <8}</level> <cyan>{name}</cyan> - {message}"


def setup_logging(level: str = LOG_LEVEL) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)
