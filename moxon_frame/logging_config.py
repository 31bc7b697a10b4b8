"""
Log output for the frame service and the generator script.
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "moxon_frame"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def _attach(logger: logging.Logger, handler: logging.Handler, level: Union[int, str]) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[Path] = None) -> logging.Logger:
    """
    Send package log records to stdout, and to log_file when given.

    Calling it again replaces the handlers, so uvicorn reloads do not
    duplicate every line.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    _attach(logger, logging.StreamHandler(sys.stdout), level)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        _attach(logger, logging.FileHandler(log_path, mode="a", encoding="utf-8"), level)

    logger.debug("Logging to stdout%s at %s", f" and {log_file}" if log_file else "", logging.getLevelName(logger.level))
    return logger
