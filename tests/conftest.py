from __future__ import annotations

import logging

import pytest

from class_name_linter.logging import LOGGER_NAME


@pytest.fixture
def package_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved_level = logger.level
    saved_handlers = list(logger.handlers)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        if handler not in saved_handlers:
            handler.close()
    for handler in saved_handlers:
        logger.addHandler(handler)
    logger.setLevel(saved_level)
