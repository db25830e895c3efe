import logging

import pytest


@pytest.fixture(autouse=True)
def reset_restrand_logger():
    """Drop handlers installed by cli.setup_logging so they don't outlive capsys."""
    yield
    logger = logging.getLogger("restrand")
    logger.handlers = []
    logger.setLevel(logging.NOTSET)
