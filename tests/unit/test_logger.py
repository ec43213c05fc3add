import logging

import pytest

from tensorscript.logger import logger, set_logging_level


@pytest.mark.unit
def test_logger_defaults():
    assert logger.name == "tensorscript"
    assert logger.handlers


@pytest.mark.unit
def test_set_logging_level():
    previous = logger.level
    try:
        set_logging_level("DEBUG")
        assert logger.level == logging.DEBUG
    finally:
        logger.setLevel(previous)
