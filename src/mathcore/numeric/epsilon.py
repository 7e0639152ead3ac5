"""
Approximate floating-point comparison.

Comparisons here are relative to the magnitude of the operands, so the same
tolerance works for values near 1 and values near 1e16. Distances measured in
units in the last place (ULPs) count the representable doubles between two
values.
"""

from __future__ import annotations

import math

from mathcore.constants.math import DEFAULT_EPSILON, MAX_ULP_DISTANCE

from .bits import ordered_bits


class Epsilon:
    """Static helpers for tolerance-based float comparison."""

    DEFAULT_EPSILON = DEFAULT_EPSILON

    @staticmethod
    def nearly_equal(first_value: float, second_value: float, tolerance: float = DEFAULT_EPSILON) -> bool:
        """
        Compare two floats with a magnitude-relative tolerance.

        The effective tolerance is ``max(tolerance, tolerance * max(|x|, |y|))``,
        so large values that differ by a few units can still compare equal.

        Args:
            first_value: First operand
            second_value: Second operand
            tolerance: Relative tolerance (absolute floor for values below 1)

        Returns:
            True if the values are equal or within the scaled tolerance.
            NaN never compares equal; infinities only equal the same infinity.

        Examples:
            >>> Epsilon.nearly_equal(1e16, 1e16 + 1)
            True
            >>> Epsilon.nearly_equal(float("inf"), 1e308)
            False
        """
        if first_value == second_value:
            return True

        if math.isnan(first_value) or math.isnan(second_value):
            return False

        if math.isinf(first_value) or math.isinf(second_value):
            return False

        diff = abs(first_value - second_value)
        max_abs = max(abs(first_value), abs(second_value))

        scaled_tolerance = max(tolerance, tolerance * max_abs)
        return diff <= scaled_tolerance

    @staticmethod
    def is_zero(value: float, tolerance: float = DEFAULT_EPSILON) -> bool:
        """Return True if ``|value| <= tolerance``; no magnitude scaling applies against zero."""
        return abs(value) <= tolerance

    @staticmethod
    def unit_in_the_last_place_diff(first_value: float, second_value: float) -> int:
        """
        Count the representable doubles separating two values.

        Returns:
            0 for equal values (including ``+0.0`` vs ``-0.0``), ``MAX_ULP_DISTANCE``
            when either value is NaN or infinite, otherwise the absolute
            difference of the ordered bit patterns capped at ``MAX_ULP_DISTANCE``.

        Examples:
            >>> Epsilon.unit_in_the_last_place_diff(1.0, 1.0000000000000002)
            1
        """
        if math.isnan(first_value) or math.isnan(second_value):
            return MAX_ULP_DISTANCE

        if first_value == second_value:
            return 0

        if math.isinf(first_value) or math.isinf(second_value):
            return MAX_ULP_DISTANCE

        diff = abs(ordered_bits(first_value) - ordered_bits(second_value))
        return min(diff, MAX_ULP_DISTANCE)


nearly_equal = Epsilon.nearly_equal
is_zero = Epsilon.is_zero
unit_in_the_last_place_diff = Epsilon.unit_in_the_last_place_diff

__all__ = [
    "Epsilon",
    "is_zero",
    "nearly_equal",
    "unit_in_the_last_place_diff",
]
