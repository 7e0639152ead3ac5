"""Settings for the mathcore command line tool, loaded from the environment."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from mathcore.config import ConfigurationError, env_bool, env_float, env_str
from mathcore.constants.math import DEFAULT_EPSILON

TOLERANCE_ENV = "MATHCORE_TOLERANCE"
LOG_LEVEL_ENV = "MATHCORE_LOG_LEVEL"
JSON_OUTPUT_ENV = "MATHCORE_JSON_OUTPUT"

DEFAULT_LOG_LEVEL = "WARNING"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class CliSettings:
    """Defaults applied by the CLI when flags are omitted"""

    tolerance: float = DEFAULT_EPSILON
    log_level: str = DEFAULT_LOG_LEVEL
    json_output: bool = False

    def __post_init__(self) -> None:
        if not math.isfinite(self.tolerance) or self.tolerance < 0:
            raise ConfigurationError.invalid_value(
                "tolerance", self.tolerance, "Tolerance must be finite and non-negative"
            )
        if self.log_level not in _LOG_LEVELS:
            raise ConfigurationError.invalid_value(
                "log_level", self.log_level, f"Expected one of {', '.join(_LOG_LEVELS)}"
            )

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


def normalize_log_level(raw: str) -> str:
    return raw.strip().upper()


def load_cli_settings() -> CliSettings:
    """
    Read CLI settings from ``MATHCORE_*`` environment variables.

    Returns:
        CliSettings with defaults for unset variables

    Raises:
        ConfigurationError: If a variable is malformed or out of range
    """
    tolerance = env_float(TOLERANCE_ENV, or_value=DEFAULT_EPSILON)
    log_level = env_str(LOG_LEVEL_ENV, or_value=DEFAULT_LOG_LEVEL)
    json_output = env_bool(JSON_OUTPUT_ENV, or_value=False)
    return CliSettings(
        tolerance=float(tolerance),
        log_level=normalize_log_level(str(log_level)),
        json_output=bool(json_output),
    )


__all__ = [
    "CliSettings",
    "DEFAULT_LOG_LEVEL",
    "JSON_OUTPUT_ENV",
    "LOG_LEVEL_ENV",
    "TOLERANCE_ENV",
    "load_cli_settings",
    "normalize_log_level",
]
