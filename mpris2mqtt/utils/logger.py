"""Logging configuration for mpris2mqtt."""

import logging
import sys

import coloredlogs

LOGGER_NAME = "mpris2mqtt"


def setup_logger(
    name: str = LOGGER_NAME,
    level: str = "INFO",
    console: bool = True
) -> logging.Logger:
    """Set up a logger with a colored console handler.

    Args:
        name: Logger name
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console: Whether to add console handler

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers.clear()  # Clear any existing handlers

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(coloredlogs.ColoredFormatter(
            fmt='%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        ))
        logger.addHandler(console_handler)

    return logger
