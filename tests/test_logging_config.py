import logging

import pytest

from moxon_frame.logging_config import LOGGER_NAME, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved_handlers, saved_level = list(logger.handlers), logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.handlers.extend(saved_handlers)
    logger.setLevel(saved_level)


def test_repeated_setup_keeps_one_handler(package_logger) -> None:
    setup_logging("INFO")
    setup_logging("DEBUG")
    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.DEBUG


def test_log_file_receives_records(package_logger, tmp_path) -> None:
    log_file = tmp_path / "logs" / "frame.log"
    logger = setup_logging(logging.INFO, log_file)
    assert logger is package_logger
    assert len(logger.handlers) == 2

    logging.getLogger(f"{LOGGER_NAME}.frame").info("composed")
    for handler in logger.handlers:
        handler.flush()
    assert "moxon_frame.frame - INFO - composed" in log_file.read_text(encoding="utf-8")
