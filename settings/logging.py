"""Logging configuration."""

import sys

from loguru import logger

from settings import LOG_DIR

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | "
    "<cyan>{extra[provider]: <8}</cyan> | <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {extra[provider]} | {name}:{function}:{line} | {message}"


def setup_logging(level: str = "INFO", to_file: bool = True):
    """Configure console logging plus an optional daily-rotated file.

    Collectors log through ``logger.bind(provider=...)``; records without a
    provider are tagged ``-``.
    """
    logger.remove()
    logger.configure(extra={"provider": "-"})

    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if to_file:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        logger.add(
            LOG_DIR / "stats_{time:YYYY-MM-DD}.log",
            format=FILE_FORMAT,
            level="DEBUG",
            rotation="00:00",
            retention="7 days",
            compression="gz",
        )
        logger.info("Logging to {}", LOG_DIR)

    return logger
