"""Lagrange Interpolation Library.

This package estimates the value of a function at a point strictly inside a
table of known samples using the Lagrange interpolation formula.

Key modules:
- interpolation: Lagrange interpolation and its error types
- utils: Sample table construction helpers
"""

from .interpolation import (
    InsufficientPointsError,
    InterpolationError,
    InvalidTableError,
    LagrangeInterpolator,
    OutOfRangeError,
    lagrange_interpolate,
)
from .utils import as_table, tabulate

__version__ = "1.0.0"

interpolate = lagrange_interpolate

__all__ = [
    "__version__",
    "interpolate",
    "lagrange_interpolate",
    "LagrangeInterpolator",
    "InterpolationError",
    "InsufficientPointsError",
    "InvalidTableError",
    "OutOfRangeError",
    "as_table",
    "tabulate",
]
