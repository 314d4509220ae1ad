"""
Exceptions raised when interpolation inputs violate their preconditions.
"""
from __future__ import annotations


class InterpolationError(ValueError):
    """Base class for interpolation contract violations."""


class InsufficientPointsError(InterpolationError):
    """Raised when a sample table holds fewer than two points."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"Need at least 2 points for interpolation, got {count}")


class OutOfRangeError(InterpolationError):
    """Raised when the query lies outside the open interval spanned by the table."""

    def __init__(self, xval: float, lower: float, upper: float):
        self.xval = xval
        self.lower = lower
        self.upper = upper
        if not xval > lower:
            msg = f"x={xval!r} is at or below the lower bound {lower!r}"
        else:
            msg = f"x={xval!r} is at or above the upper bound {upper!r}"
        super().__init__(f"{msg}; extrapolation is not supported")


class InvalidTableError(InterpolationError):
    """Raised when pillars and values cannot form a valid sample table."""
