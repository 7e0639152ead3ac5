"""
Centralized logging configuration for the mathcore tools.

This module provides a single setup_logging function that configures the
root logger consistently:
- One console handler owned by mathcore (repeated calls replace it)
- Level taken from the argument or MATHCORE_LOG_LEVEL
- User-friendly mode that prints bare messages
"""

import logging
import sys
import threading
from typing import Optional, TextIO, Union

from mathcore.config import env_str
from mathcore.settings import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV, normalize_log_level

# Thread-safe lock for logging configuration
_config_lock = threading.Lock()
_MODULE_LOGGER = logging.getLogger(__name__)
_HANDLER_NAME = "mathcore-console"

TECHNICAL_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FRIENDLY_FORMAT = "%(message)s"


def _resolve_level(level: Union[int, str, None]) -> int:
    if isinstance(level, int):
        return level
    if level is None:
        level = env_str(LOG_LEVEL_ENV, or_value=DEFAULT_LOG_LEVEL)
    resolved = logging.getLevelName(normalize_log_level(str(level)))
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def _close_managed_handlers(root_logger: logging.Logger) -> None:
    """Remove and close handlers previously installed by setup_logging."""
    for handler in list(root_logger.handlers):
        if handler.get_name() != _HANDLER_NAME:
            continue
        root_logger.removeHandler(handler)
        try:
            handler.close()
        except OSError as exc:  # Best-effort cleanup operation
            _MODULE_LOGGER.debug("Handler close failed: %s", exc)


def _build_console_handler(user_friendly: bool, stream: TextIO) -> logging.Handler:
    if user_friendly:
        formatter = logging.Formatter(FRIENDLY_FORMAT)
    else:
        formatter = logging.Formatter(TECHNICAL_FORMAT, "%Y-%m-%d %H:%M:%S")

    console_handler = logging.StreamHandler(stream)
    console_handler.set_name(_HANDLER_NAME)
    console_handler.setFormatter(formatter)
    return console_handler


def setup_logging(
    level: Union[int, str, None] = None,
    user_friendly: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """Configure the root logger and return the installed console handler"""

    # Use thread-safe lock to ensure single configuration
    with _config_lock:
        root_logger = logging.getLogger()
        resolved_level = _resolve_level(level)

        _close_managed_handlers(root_logger)

        console_handler = _build_console_handler(user_friendly, stream if stream is not None else sys.stderr)
        root_logger.addHandler(console_handler)
        root_logger.setLevel(resolved_level)
        return console_handler


__all__ = ["FRIENDLY_FORMAT", "TECHNICAL_FORMAT", "setup_logging"]
