# scenery/logging_config.py
"""
Logging setup for applications that embed scenery.

Every module logs through `logging.getLogger(__name__)`, so all records end
up under the `scenery` namespace. The library itself never configures
handlers; call `setup_logging()` from application code to see them.
"""
import logging
import sys
from typing import Optional, TextIO, Union

LOGGER_NAME = "scenery"
LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"
DATE_FORMAT = "%H:%M:%S"


def _attach(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Route `scenery.*` records to a console stream and optionally a file.

    Args:
        level: Level as a number or name, e.g. logging.DEBUG or "DEBUG".
        log_file: Optional path; the file is truncated on each call.
        stream: Console stream, stdout by default.

    Returns:
        The `scenery` package logger.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Calling twice must not duplicate records
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    _attach(logger, logging.StreamHandler(stream or sys.stdout), level)
    if log_file:
        _attach(logger, logging.FileHandler(log_file, mode="w", encoding="utf-8"), level)

    logger.debug("scenery logging configured at %s", logging.getLevelName(level))
    return logger
