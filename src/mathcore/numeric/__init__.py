"""Numeric value types: tolerance comparison and real intervals."""

from .epsilon import Epsilon, is_zero, nearly_equal, unit_in_the_last_place_diff
from .interval import Interval, IntervalType
from .interval_parser import parse_interval

__all__ = [
    "Epsilon",
    "Interval",
    "IntervalType",
    "is_zero",
    "nearly_equal",
    "parse_interval",
    "unit_in_the_last_place_diff",
]
