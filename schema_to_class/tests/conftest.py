import logging

import pytest

from schema_to_class.gen_logging import LOGGER_NAME


@pytest.fixture(autouse=True)
def _restore_package_logger():
    """Undo global logger state (handlers, propagate) left by CLI invocations."""
    logger = logging.getLogger(LOGGER_NAME)
    saved = (logger.level, list(logger.handlers), logger.propagate)
    yield
    logger.setLevel(saved[0])
    logger.handlers = saved[1]
    logger.propagate = saved[2]
