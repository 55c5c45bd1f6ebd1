import logging

import pytest

from thinktool.runtime.event_logger import LOGGER_NAME


@pytest.fixture(autouse=True)
def _reset_thinktool_logger():
    # configure_logging() detaches the package logger from root; undo that per test
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
