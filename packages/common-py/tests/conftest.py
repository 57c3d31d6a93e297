"""Pytest configuration and fixtures for common-py tests."""
import io
import logging

import pytest


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def log_stream():
    """Capture modoc log output; restores the logger afterwards."""
    root = logging.getLogger("modoc")
    original_level = root.level
    original_handlers = list(root.handlers)

    stream = io.StringIO()
    yield stream

    root.setLevel(original_level)
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in original_handlers:
        root.addHandler(handler)
