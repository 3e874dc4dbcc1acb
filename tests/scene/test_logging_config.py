import io
import logging

import pytest

from scenery.logging_config import LOGGER_NAME, setup_logging


@pytest.fixture
def restore_logger():
    logger = logging.getLogger(LOGGER_NAME)
    level = logger.level
    handlers = list(logger.handlers)
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_setup_logging_writes_file(tmp_path, restore_logger):
    log_file = tmp_path / "scenery.log"

    logger = setup_logging(logging.DEBUG, str(log_file), stream=io.StringIO())
    logging.getLogger("scenery.materials").debug("hello from materials")
    for handler in logger.handlers:
        handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "scenery logging configured at DEBUG" in text
    assert "[scenery.materials] hello from materials" in text


def test_setup_logging_is_idempotent(restore_logger):
    setup_logging(stream=io.StringIO())
    logger = setup_logging(stream=io.StringIO())

    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO


def test_level_by_name(restore_logger):
    stream = io.StringIO()

    logger = setup_logging("warning", stream=stream)
    logging.getLogger("scenery.mesh").info("not shown")
    logging.getLogger("scenery.mesh").warning("shown")

    assert logger.level == logging.WARNING
    assert "not shown" not in stream.getvalue()
    assert "WARNING [scenery.mesh] shown" in stream.getvalue()


def test_unknown_level_name(restore_logger):
    with pytest.raises(ValueError, match="Unknown log level"):
        setup_logging("LOUD")
