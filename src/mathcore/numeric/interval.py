"""
Real-number intervals with open or closed endpoints.

An ``Interval`` is an immutable value built through named factories that
validate and normalize their endpoints. A single canonical empty interval
stands for every degenerate construction or intersection; it stores NaN bounds
and OPEN/OPEN endpoint types so inspection and equality stay deterministic.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from mathcore.constants.math import EMPTY_SET_SYMBOL
from mathcore.errors import IntervalBoundsError

from .bits import double_to_long_bits
from .formatting import format_bound

logger = logging.getLogger(__name__)


class IntervalType(Enum):
    """Whether an endpoint belongs to the interval"""

    OPEN = "open"
    CLOSED = "closed"


_FACTORY_NAMES = {
    (IntervalType.CLOSED, IntervalType.CLOSED): "closed",
    (IntervalType.OPEN, IntervalType.OPEN): "open",
    (IntervalType.OPEN, IntervalType.CLOSED): "open_closed",
    (IntervalType.CLOSED, IntervalType.OPEN): "closed_open",
}

_EMPTY_HASH = hash(("Interval", "empty"))
_CONSTRUCTION_TOKEN = object()

Endpoint = Tuple[float, IntervalType]


def _shared_type(first: IntervalType, second: IntervalType) -> IntervalType:
    """A shared boundary stays CLOSED only when both sides include it."""
    if first is IntervalType.CLOSED and second is IntervalType.CLOSED:
        return IntervalType.CLOSED
    return IntervalType.OPEN


def _greater_lower(first: "Interval", second: "Interval") -> Endpoint:
    if first._lower > second._lower:
        return first._lower, first._lower_type
    if first._lower < second._lower:
        return second._lower, second._lower_type
    return first._lower, _shared_type(first._lower_type, second._lower_type)


def _lesser_upper(first: "Interval", second: "Interval") -> Endpoint:
    if first._upper < second._upper:
        return first._upper, first._upper_type
    if first._upper > second._upper:
        return second._upper, second._upper_type
    return first._upper, _shared_type(first._upper_type, second._upper_type)


def _repr_bound(value: float) -> str:
    if math.isinf(value):
        return "float('inf')" if value > 0 else "float('-inf')"
    return repr(value)


@dataclass(frozen=True, eq=False, repr=False)
class Interval:
    """
    Immutable interval of real numbers.

    Instances come only from the factories (``closed``, ``open``,
    ``open_closed``, ``closed_open``, ``empty``, ``create``, ``parse``).
    Calling ``Interval(...)`` directly raises ``TypeError``.
    """

    _lower: float
    _upper: float
    _lower_type: IntervalType
    _upper_type: IntervalType
    _empty: bool
    _token: object = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self._token is not _CONSTRUCTION_TOKEN:
            raise TypeError("Interval cannot be constructed directly; use a factory such as Interval.closed()")

    @classmethod
    def _build(
        cls,
        lower: float,
        upper: float,
        lower_type: IntervalType,
        upper_type: IntervalType,
        empty: bool = False,
    ) -> "Interval":
        return cls(lower, upper, lower_type, upper_type, empty, _CONSTRUCTION_TOKEN)

    @classmethod
    def empty(cls) -> "Interval":
        """Return the canonical empty interval."""
        return _EMPTY

    @classmethod
    def create(
        cls,
        lower: float,
        upper: float,
        lower_type: IntervalType,
        upper_type: IntervalType,
    ) -> "Interval":
        """
        Build an interval from endpoints and endpoint types.

        Equal endpoints form a single point when both types are CLOSED and
        collapse to the empty interval otherwise.

        Args:
            lower: Lower endpoint (may be ``-inf``)
            upper: Upper endpoint (may be ``inf``)
            lower_type: Whether the lower endpoint is included
            upper_type: Whether the upper endpoint is included

        Returns:
            The normalized interval

        Raises:
            IntervalBoundsError: If an endpoint is NaN or ``lower > upper``
        """
        lower = float(lower)
        upper = float(upper)
        if math.isnan(lower) or math.isnan(upper):
            logger.debug("Rejected interval with NaN endpoint: lower=%r upper=%r", lower, upper)
            raise IntervalBoundsError.nan_endpoint(lower, upper)
        if lower > upper:
            logger.debug("Rejected interval with inverted endpoints: lower=%r upper=%r", lower, upper)
            raise IntervalBoundsError.inverted_bounds(lower, upper)

        if lower == upper:
            if lower_type is IntervalType.CLOSED and upper_type is IntervalType.CLOSED:
                return cls._build(lower, upper, lower_type, upper_type)
            logger.debug("Interval at %r with a non-closed endpoint collapsed to empty", lower)
            return _EMPTY

        return cls._build(lower, upper, lower_type, upper_type)

    @classmethod
    def closed(cls, lower: float, upper: float) -> "Interval":
        """``[lower, upper]``"""
        return cls.create(lower, upper, IntervalType.CLOSED, IntervalType.CLOSED)

    @classmethod
    def open(cls, lower: float, upper: float) -> "Interval":
        """``(lower, upper)``"""
        return cls.create(lower, upper, IntervalType.OPEN, IntervalType.OPEN)

    @classmethod
    def open_closed(cls, lower: float, upper: float) -> "Interval":
        """``(lower, upper]``"""
        return cls.create(lower, upper, IntervalType.OPEN, IntervalType.CLOSED)

    @classmethod
    def closed_open(cls, lower: float, upper: float) -> "Interval":
        """``[lower, upper)``"""
        return cls.create(lower, upper, IntervalType.CLOSED, IntervalType.OPEN)

    @classmethod
    def parse(cls, text: str) -> "Interval":
        """Parse the text rendering produced by ``str(interval)``."""
        from .interval_parser import parse_interval

        return parse_interval(text)

    @property
    def lower(self) -> float:
        return math.nan if self._empty else self._lower

    @property
    def upper(self) -> float:
        return math.nan if self._empty else self._upper

    @property
    def lower_type(self) -> IntervalType:
        return self._lower_type

    @property
    def upper_type(self) -> IntervalType:
        return self._upper_type

    def is_empty(self) -> bool:
        return self._empty

    def is_degenerate(self) -> bool:
        """True for a single closed point ``[a, a]``."""
        return (
            not self._empty
            and self._lower == self._upper
            and self._lower_type is IntervalType.CLOSED
            and self._upper_type is IntervalType.CLOSED
        )

    def is_closed_left(self) -> bool:
        return self._lower_type is IntervalType.CLOSED

    def is_closed_right(self) -> bool:
        return self._upper_type is IntervalType.CLOSED

    def is_open_left(self) -> bool:
        return self._lower_type is IntervalType.OPEN

    def is_open_right(self) -> bool:
        return self._upper_type is IntervalType.OPEN

    def contains(self, number: float) -> bool:
        """Return True if *number* lies in the interval; NaN is never contained."""
        if self._empty or math.isnan(number):
            return False

        if self._lower_type is IntervalType.CLOSED:
            left_ok = number >= self._lower
        else:
            left_ok = number > self._lower

        if self._upper_type is IntervalType.CLOSED:
            right_ok = number <= self._upper
        else:
            right_ok = number < self._upper

        return left_ok and right_ok

    def length(self) -> float:
        """
        Return the measure of the interval.

        Returns:
            0.0 for the empty interval and for single points, ``inf`` for any
            unbounded interval, otherwise ``upper - lower`` (never negative).
        """
        if self._empty:
            return 0.0

        if math.isinf(self._lower) or math.isinf(self._upper):
            if self._lower == self._upper:
                return 0.0
            return math.inf
        return max(0.0, self._upper - self._lower)

    def mid_point(self) -> float:
        """Return the centre of a bounded interval, NaN when empty or unbounded."""
        if self._empty:
            return math.nan
        if math.isinf(self._lower) or math.isinf(self._upper):
            return math.nan
        return self._lower + (self._upper - self._lower) / 2.0

    def intersect(self, other: "Interval") -> "Interval":
        """
        Return the set intersection of two intervals.

        The tighter bound on each side keeps its own endpoint type; when both
        intervals share a bound it stays CLOSED only if both include it.
        Intervals that merely touch at a point intersect in ``[a, a]`` when
        both include the point and in the empty interval otherwise.

        Examples:
            >>> str(Interval.open(0, 2).intersect(Interval.closed(1, 3)))
            '[1.0, 2.0)'
            >>> str(Interval.closed(0, 1).intersect(Interval.open(1, 2)))
            '∅'
        """
        if self._empty or other._empty:
            return _EMPTY

        new_lower, new_lower_type = _greater_lower(self, other)
        new_upper, new_upper_type = _lesser_upper(self, other)

        if new_lower > new_upper:
            return _EMPTY

        if new_lower == new_upper:
            if new_lower_type is IntervalType.CLOSED and new_upper_type is IntervalType.CLOSED:
                return Interval._build(new_lower, new_upper, IntervalType.CLOSED, IntervalType.CLOSED)
            return _EMPTY
        return Interval._build(new_lower, new_upper, new_lower_type, new_upper_type)

    def __and__(self, other: object) -> "Interval":
        if not isinstance(other, Interval):
            return NotImplemented
        return self.intersect(other)

    def __contains__(self, number: float) -> bool:
        return self.contains(number)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Interval):
            return NotImplemented
        if self._empty and other._empty:
            return True
        if self._empty or other._empty:
            return False
        return (
            double_to_long_bits(self._lower) == double_to_long_bits(other._lower)
            and double_to_long_bits(self._upper) == double_to_long_bits(other._upper)
            and self._lower_type is other._lower_type
            and self._upper_type is other._upper_type
        )

    def __hash__(self) -> int:
        if self._empty:
            return _EMPTY_HASH
        return hash(
            (
                double_to_long_bits(self._lower),
                double_to_long_bits(self._upper),
                self._lower_type,
                self._upper_type,
            )
        )

    def __str__(self) -> str:
        if self._empty:
            return EMPTY_SET_SYMBOL

        left = "[" if self._lower_type is IntervalType.CLOSED else "("
        right = "]" if self._upper_type is IntervalType.CLOSED else ")"
        return f"{left}{format_bound(self._lower)}, {format_bound(self._upper)}{right}"

    def __repr__(self) -> str:
        if self._empty:
            return "Interval.empty()"
        factory: Optional[str] = _FACTORY_NAMES.get((self._lower_type, self._upper_type))
        return f"Interval.{factory}({_repr_bound(self._lower)}, {_repr_bound(self._upper)})"


_EMPTY = Interval._build(math.nan, math.nan, IntervalType.OPEN, IntervalType.OPEN, empty=True)

__all__ = ["Interval", "IntervalType"]
