import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_root_logger():
    """Drop handlers added by main.configure_logging() between tests."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
