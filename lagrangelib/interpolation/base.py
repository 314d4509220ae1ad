"""
Base class for sample-table interpolation methods.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List, Sequence

import numpy as np

from .errors import InsufficientPointsError, InvalidTableError

logger = logging.getLogger(__name__)

MIN_POINTS = 2


class Interpolator(ABC):
    """Base class for interpolation over a fixed table of samples.

    Backs the validated object API; ``lagrange_interpolate`` needs none of it.
    """

    def __init__(self, pillars: Sequence[float], values: Sequence[float]):
        """
        Initialize interpolator.

        Args:
            pillars: Sample abscissae
            values: Sample ordinates, one per pillar
        """
        if len(pillars) != len(values):
            raise InvalidTableError("Pillars and values must have same length")
        if len(pillars) < MIN_POINTS:
            raise InsufficientPointsError(len(pillars))

        # Sort by pillars
        sorted_pairs = sorted(zip(pillars, values, strict=True))
        self.pillars = np.array([p[0] for p in sorted_pairs], dtype=float)
        self.values = np.array([p[1] for p in sorted_pairs], dtype=float)

        if not (np.all(np.isfinite(self.pillars)) and np.all(np.isfinite(self.values))):
            raise InvalidTableError("Pillars and values must be finite numbers")
        if len(np.unique(self.pillars)) != len(self.pillars):
            raise InvalidTableError("Duplicate pillars not allowed")

        logger.debug(
            "%s built on %s points over (%s, %s)",
            type(self).__name__, len(self.pillars), self.lower_bound, self.upper_bound,
        )

    @property
    def lower_bound(self) -> float:
        return float(self.pillars[0])

    @property
    def upper_bound(self) -> float:
        return float(self.pillars[-1])

    @abstractmethod
    def interpolate(self, t: float) -> float:
        """Interpolate value at t."""
        pass

    def interpolate_many(self, times: Sequence[float]) -> List[float]:
        """Interpolate values at multiple points."""
        return [self.interpolate(t) for t in times]
