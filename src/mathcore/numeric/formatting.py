"""Text conventions for floating-point values in renderings."""

from __future__ import annotations

import math

POSITIVE_INFINITY_TEXT = "Infinity"
NEGATIVE_INFINITY_TEXT = "-Infinity"
NAN_TEXT = "NaN"


def _non_finite_text(value: float) -> str:
    if math.isnan(value):
        return NAN_TEXT
    return POSITIVE_INFINITY_TEXT if value > 0 else NEGATIVE_INFINITY_TEXT


def format_bound(value: float) -> str:
    """
    Render a bound using the shortest round-trip form.

    Finite values always carry a decimal point or exponent (``1.0``, not
    ``1``); infinities render as ``Infinity`` / ``-Infinity``.
    """
    if not math.isfinite(value):
        return _non_finite_text(value)
    return repr(float(value))


def format_fixed(value: float, digits: int = 2) -> str:
    """Render *value* with a fixed number of decimals, spelling out non-finite values."""
    if not math.isfinite(value):
        return _non_finite_text(value)
    return f"{value:.{digits}f}"


__all__ = [
    "NAN_TEXT",
    "NEGATIVE_INFINITY_TEXT",
    "POSITIVE_INFINITY_TEXT",
    "format_bound",
    "format_fixed",
]
