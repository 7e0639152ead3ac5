"""Mathematical constants and precision thresholds.

These constants define precision levels for floating-point comparisons
and the sentinels returned by total numeric operations.
"""

# Float comparison tolerance
DEFAULT_EPSILON = 1e-12

# Largest signed 64-bit integer; returned as the ULP distance when no
# meaningful distance exists (NaN or infinite operands)
MAX_ULP_DISTANCE = (1 << 63) - 1

# Rendering of the empty interval
EMPTY_SET_SYMBOL = "∅"

__all__ = [
    "DEFAULT_EPSILON",
    "MAX_ULP_DISTANCE",
    "EMPTY_SET_SYMBOL",
]
