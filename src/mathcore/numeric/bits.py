"""IEEE-754 bit-pattern helpers for binary64 values."""

from __future__ import annotations

import math

import numpy as np

_CANONICAL_NAN_BITS = 0x7FF8000000000000
_MAGNITUDE_MASK = 0x7FFFFFFFFFFFFFFF


def double_to_long_bits(value: float) -> int:
    """
    Return the bit pattern of *value* as a signed 64-bit integer.

    Every NaN collapses to one canonical pattern, so two NaNs share bits while
    ``+0.0`` and ``-0.0`` keep distinct patterns.

    Examples:
        >>> double_to_long_bits(1.0)
        4607182418800017408
        >>> double_to_long_bits(-0.0)
        -9223372036854775808
    """
    if math.isnan(value):
        return _CANONICAL_NAN_BITS
    return int(np.array(value, dtype=np.float64).view(np.int64).item())


def ordered_bits(value: float) -> int:
    """
    Map *value* onto an integer line that preserves numeric ordering.

    Non-negative values keep their raw bits; negative values become the
    negated magnitude bits, so both zeros land on 0 and adjacent doubles
    differ by exactly one.
    """
    bits = double_to_long_bits(value)
    if bits >= 0:
        return bits
    return -(bits & _MAGNITUDE_MASK)


__all__ = ["double_to_long_bits", "ordered_bits"]
