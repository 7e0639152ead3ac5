"""Tests for mathcore.logging_config."""

from __future__ import annotations

import io
import logging

import pytest

from mathcore.logging_config import setup_logging


def _managed_handlers() -> list:
    return [handler for handler in logging.getLogger().handlers if handler.get_name() == "mathcore-console"]


def test_installs_console_handler_and_level():
    stream = io.StringIO()
    handler = setup_logging("DEBUG", stream=stream)

    assert handler in logging.getLogger().handlers
    assert logging.getLogger().level == logging.DEBUG

    logging.getLogger("mathcore.test").debug("hello %s", "world")
    output = stream.getvalue()
    assert "mathcore.test - DEBUG - hello world" in output


def test_console_handler_defaults_to_stderr(monkeypatch):
    fake_stderr = io.StringIO()
    monkeypatch.setattr("sys.stderr", fake_stderr)

    handler = setup_logging("INFO")

    assert handler.stream is fake_stderr


def test_repeated_calls_replace_handler():
    setup_logging("INFO", stream=io.StringIO())
    setup_logging("WARNING", stream=io.StringIO())

    assert len(_managed_handlers()) == 1
    assert logging.getLogger().level == logging.WARNING


def test_user_friendly_prints_bare_messages():
    stream = io.StringIO()
    setup_logging(logging.INFO, user_friendly=True, stream=stream)

    logging.getLogger("mathcore.test").info("plain message")

    assert stream.getvalue() == "plain message\n"


def test_level_defaults_to_environment(monkeypatch):
    monkeypatch.setenv("MATHCORE_LOG_LEVEL", "error")
    setup_logging(stream=io.StringIO())
    assert logging.getLogger().level == logging.ERROR


def test_level_defaults_to_warning():
    setup_logging(stream=io.StringIO())
    assert logging.getLogger().level == logging.WARNING


def test_unknown_level_raises():
    with pytest.raises(ValueError, match="Unknown log level"):
        setup_logging("chatty", stream=io.StringIO())
