"""Pytest configuration for Sessionizer tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def _isolate_logging(tmp_path, monkeypatch):
    """Keep test runs from writing into the real log location."""
    monkeypatch.setenv("SESSIONIZER_LOG_FILE", str(tmp_path / "sessionizer.log"))
    yield
    logger = logging.getLogger("sessionizer")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def pytest_collection_modifyitems(config, items):
    """Set per-marker timeouts: unit=2s, integration=15s."""
    for item in items:
        if "unit" in item.keywords:
            item.add_marker(pytest.mark.timeout(2))
        elif "integration" in item.keywords:
            item.add_marker(pytest.mark.timeout(15))
