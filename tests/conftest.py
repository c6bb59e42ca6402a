"""Pytest configuration and fixtures."""

import logging

import pytest

from expectpy.config import set_config


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    """Start each test from default settings, ignoring the caller's environment."""
    monkeypatch.delenv("EXPECTPY_CONFIG", raising=False)
    set_config(None)
    yield
    set_config(None)


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Reset expectpy loggers after each test so handlers don't leak between tests."""
    yield

    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("expectpy"):
            logger = logging.getLogger(name)
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()
            logger.setLevel(logging.NOTSET)
