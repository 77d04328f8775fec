import logging

import numpy as np
import pytest


@pytest.fixture(autouse=True)
def setup_logging():
    """Silence the package logger during tests."""
    logger = logging.getLogger("feedforward")
    logger.setLevel(logging.CRITICAL)

    yield

    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def rng():
    return np.random.default_rng(42)
