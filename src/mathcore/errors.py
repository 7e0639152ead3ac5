"""Common error types used across the codebase."""

from __future__ import annotations


class IntervalBoundsError(ValueError):
    """Raised when interval endpoints cannot describe a valid interval."""

    def __init__(self, lower: float, upper: float, *, reason: str = "Invalid interval endpoints") -> None:
        message = f"{reason}: lower={lower!r}, upper={upper!r}"
        super().__init__(message)
        self.lower = lower
        self.upper = upper
        self.reason = reason

    @classmethod
    def nan_endpoint(cls, lower: float, upper: float) -> "IntervalBoundsError":
        """Create error for a NaN endpoint."""
        return cls(lower, upper, reason="NaN endpoints not allowed")

    @classmethod
    def inverted_bounds(cls, lower: float, upper: float) -> "IntervalBoundsError":
        """Create error for a lower endpoint above the upper endpoint."""
        return cls(lower, upper, reason="upper endpoint must be greater than lower endpoint")


class IntervalParseError(ValueError):
    """Raised when interval text is malformed."""

    def __init__(self, text: str, *, reason: str = "Malformed interval") -> None:
        message = f"{reason}: {text!r}"
        super().__init__(message)
        self.text = text
        self.reason = reason


__all__ = ["IntervalBoundsError", "IntervalParseError"]
