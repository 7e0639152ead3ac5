"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import logging

import pytest

from mathcore.config import runtime

_MATHCORE_ENV_VARS = ("MATHCORE_TOLERANCE", "MATHCORE_LOG_LEVEL", "MATHCORE_JSON_OUTPUT")


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Ignore the developer's environment and .env files."""
    for name in _MATHCORE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(runtime, "_DEFAULT_VALUES", {})
    yield


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler and level changes made by setup_logging."""
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if handler not in saved_handlers:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(saved_level)
