"""
Logging helpers for the Vanish client.

The library never configures the root logger. Applications that want
to see client logs call setup_logging() or attach their own handlers
to the "vanish" logger.
"""
import logging
import sys

ROOT_LOGGER_NAME = "vanish"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the vanish namespace."""
    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Attach a stream handler to the vanish logger.

    Safe to call more than once; only the level is updated on
    repeated calls.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ...)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level.upper())

    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
