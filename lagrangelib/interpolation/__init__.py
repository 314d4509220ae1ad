"""
Interpolation methods for tables of (x, y) samples.

Values are only produced strictly inside the sampled range; queries at or
beyond either end raise instead of extrapolating.
"""

# Base classes
from .base import MIN_POINTS, Interpolator

# Errors
from .errors import (
    InsufficientPointsError,
    InterpolationError,
    InvalidTableError,
    OutOfRangeError,
)

# Lagrange interpolation
from .lagrange import LagrangeInterpolator, SampleTable, lagrange_interpolate

__all__ = [
    # Base classes
    'Interpolator',
    'MIN_POINTS',

    # Errors
    'InterpolationError',
    'InsufficientPointsError',
    'InvalidTableError',
    'OutOfRangeError',

    # Lagrange interpolation
    'LagrangeInterpolator',
    'SampleTable',
    'lagrange_interpolate',
]
