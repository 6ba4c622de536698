"""
Logging Configuration
Attaches handlers to the 'geomlayer' logger namespace.

The package itself only creates module loggers; nothing is printed until an
application calls ``setup_logging``. Missing-value diagnostics of the geoms
are emitted at WARNING level.
"""
import logging
import sys
from typing import IO, Optional

from geomlayer.config import LOGGER_NAME, LOG_LEVEL

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
DATE_FORMAT = '%H:%M:%S'


def _attach(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)


def reset_logging() -> None:
    """Close and detach every handler of the package logger."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def setup_logging(
    level: int = LOG_LEVEL,
    log_file: Optional[str] = None,
    stream: Optional[IO[str]] = None
) -> logging.Logger:
    """
    Route the package's log records to a stream and optionally a file.

    Calling it again replaces the previous handlers.

    Args:
        level: Logging level, ``GEOMLAYER_LOG_LEVEL`` by default.
        log_file: Optional path of a log file (overwritten).
        stream: Console stream, stderr by default.

    Returns:
        The package logger.
    """
    reset_logging()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    _attach(logger, logging.StreamHandler(stream or sys.stderr), level)
    if log_file:
        _attach(logger, logging.FileHandler(log_file, mode='w', encoding='utf-8'), level)

    logger.debug("Logging initialized.")
    return logger
