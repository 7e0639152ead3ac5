"""Constants package for shared constant values."""

from .math import DEFAULT_EPSILON, EMPTY_SET_SYMBOL, MAX_ULP_DISTANCE

__all__ = [
    "DEFAULT_EPSILON",
    "EMPTY_SET_SYMBOL",
    "MAX_ULP_DISTANCE",
]
