import logging

import pytest

from seqflow.logger.logger import logger as package_logger


@pytest.fixture
def seqflow_caplog(caplog):
    """caplog wired to the package logger, which does not propagate to root."""
    package_logger.addHandler(caplog.handler)
    previous = package_logger.level
    package_logger.setLevel(logging.DEBUG)
    yield caplog
    package_logger.setLevel(previous)
    package_logger.removeHandler(caplog.handler)
