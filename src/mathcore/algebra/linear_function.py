"""
Affine functions of one variable.

``LinearFunction`` models ``f(x) = a*x + b`` as an immutable value whose
monotonicity is classified once, at construction.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

import numpy as np
from numpy.typing import ArrayLike

from mathcore.numeric.bits import double_to_long_bits
from mathcore.numeric.formatting import format_fixed

logger = logging.getLogger(__name__)


class LinearFunctionType(Enum):
    """Monotonicity of a linear function, decided by the sign of its slope"""

    INCREASING = "increasing"
    DECREASING = "decreasing"
    CONSTANT = "constant"
    UNDEFINED = "undefined"  # NaN slope


def _classify(angular_coefficient: float) -> LinearFunctionType:
    if angular_coefficient == 0:
        return LinearFunctionType.CONSTANT
    if angular_coefficient > 0:
        return LinearFunctionType.INCREASING
    if angular_coefficient < 0:
        return LinearFunctionType.DECREASING
    return LinearFunctionType.UNDEFINED


@dataclass(frozen=True, eq=False)
class LinearFunction:
    """
    Immutable affine function ``f(x) = a*x + b``.

    Coefficients are stored as given; NaN and infinite values pass through
    unchecked. A NaN slope classifies as ``LinearFunctionType.UNDEFINED``.
    """

    angular_coefficient: float
    linear_coefficient: float
    type: LinearFunctionType = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "angular_coefficient", float(self.angular_coefficient))
        object.__setattr__(self, "linear_coefficient", float(self.linear_coefficient))
        object.__setattr__(self, "type", _classify(self.angular_coefficient))
        if self.type is LinearFunctionType.UNDEFINED:
            logger.debug("Linear function built with NaN slope; type is undefined")

    @classmethod
    def of(cls, a: float, b: float) -> "LinearFunction":
        """Build ``f(x) = a*x + b``."""
        return cls(a, b)

    def apply(self, x: ArrayLike) -> float | np.ndarray:
        """Evaluate ``a*x + b``; arrays are evaluated element-wise."""
        if isinstance(x, (list, tuple)):
            x = np.asarray(x, dtype=np.float64)
        return self.angular_coefficient * x + self.linear_coefficient

    def root(self) -> float:
        """
        Return the zero crossing ``-b / a``.

        A constant function has no single root; its constant value ``b`` is
        returned instead.
        """
        if self.angular_coefficient == 0:
            return self.linear_coefficient
        return -self.linear_coefficient / self.angular_coefficient

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, LinearFunction):
            return NotImplemented
        return double_to_long_bits(self.angular_coefficient) == double_to_long_bits(
            other.angular_coefficient
        ) and double_to_long_bits(self.linear_coefficient) == double_to_long_bits(other.linear_coefficient)

    def __hash__(self) -> int:
        return hash((double_to_long_bits(self.angular_coefficient), double_to_long_bits(self.linear_coefficient)))

    def __str__(self) -> str:
        return f"{format_fixed(self.angular_coefficient)}x + {format_fixed(self.linear_coefficient)} = 0"

    def __repr__(self) -> str:
        return f"LinearFunction.of({self.angular_coefficient!r}, {self.linear_coefficient!r})"


__all__ = ["LinearFunction", "LinearFunctionType"]
