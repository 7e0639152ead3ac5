"""Tests for mathcore.numeric.bits."""

from __future__ import annotations

import math

import numpy as np

from mathcore.numeric.bits import double_to_long_bits, ordered_bits


class TestDoubleToLongBits:
    """Tests for double_to_long_bits function."""

    def test_one(self) -> None:
        assert double_to_long_bits(1.0) == 0x3FF0000000000000

    def test_negative_zero_sets_sign_bit_only(self) -> None:
        assert double_to_long_bits(-0.0) == -(1 << 63)
        assert double_to_long_bits(0.0) == 0

    def test_signed_zeros_differ(self) -> None:
        assert double_to_long_bits(0.0) != double_to_long_bits(-0.0)

    def test_all_nans_share_bits(self) -> None:
        assert double_to_long_bits(math.nan) == double_to_long_bits(-math.nan)
        assert double_to_long_bits(float("nan")) == double_to_long_bits(np.float64("nan"))

    def test_infinity(self) -> None:
        assert double_to_long_bits(math.inf) == 0x7FF0000000000000

    def test_accepts_int(self) -> None:
        assert double_to_long_bits(1) == double_to_long_bits(1.0)


class TestOrderedBits:
    """Tests for ordered_bits function."""

    def test_zeros_map_to_origin(self) -> None:
        assert ordered_bits(0.0) == 0
        assert ordered_bits(-0.0) == 0

    def test_smallest_subnormals_are_adjacent_to_zero(self) -> None:
        assert ordered_bits(5e-324) == 1
        assert ordered_bits(-5e-324) == -1

    def test_preserves_ordering(self) -> None:
        values = [-math.inf, -1e308, -1.0, -5e-324, 0.0, 5e-324, 1.0, 1e308, math.inf]
        mapped = [ordered_bits(value) for value in values]
        assert mapped == sorted(mapped)
        assert len(set(mapped)) == len(mapped)

    def test_adjacent_doubles_differ_by_one(self) -> None:
        above = float(np.nextafter(1.0, 2.0))
        below = float(np.nextafter(-1.0, -2.0))
        assert ordered_bits(above) - ordered_bits(1.0) == 1
        assert ordered_bits(-1.0) - ordered_bits(below) == 1
