"""
Lagrange polynomial interpolation through a table of samples.
"""
from __future__ import annotations

import logging
from typing import Sequence, Tuple

from ..utils.tables import as_table
from .base import MIN_POINTS, Interpolator
from .errors import InsufficientPointsError, OutOfRangeError

logger = logging.getLogger(__name__)

SampleTable = Sequence[Tuple[float, float]]


def lagrange_interpolate(table: SampleTable, xval: float) -> float:
    """Interpolate the value at ``xval`` as a sum of Lagrange basis polynomials.

    The result is exact, up to rounding, when the samples come from a
    polynomial of degree less than ``len(table)``.

    Parameters
    ----------
    table : Sequence[Tuple[float, float]]
        ``(x, y)`` samples ordered by strictly increasing ``x``. The ordering
        is the caller's responsibility; only the first and last ``x`` are read
        for the bounds check.
    xval : float
        Query abscissa. Must lie strictly between the first and last ``x``.

    Returns
    -------
    float
        The interpolated ordinate.

    Raises
    ------
    InsufficientPointsError
        If the table holds fewer than two samples.
    OutOfRangeError
        If ``xval`` is not strictly inside the sampled range.
    """
    n = len(table)
    if n < MIN_POINTS:
        logger.debug("Rejecting table of %s points", n)
        raise InsufficientPointsError(n)

    xval = float(xval)
    lower = float(table[0][0])
    upper = float(table[-1][0])
    if not lower < xval < upper:
        logger.debug("Rejecting x=%s outside (%s, %s)", xval, lower, upper)
        raise OutOfRangeError(xval, lower, upper)

    logger.debug("Lagrange interpolation on %s points at x=%s", n, xval)
    total = 0.0
    for i in range(n):
        x_i = float(table[i][0])
        y_i = float(table[i][1])

        # L_i(xval)
        product = 1.0
        for j in range(n):
            if j == i:
                continue
            x_j = float(table[j][0])
            product *= (xval - x_j) / (x_i - x_j)

        total += y_i * product
    return total


class LagrangeInterpolator(Interpolator):
    """Lagrange interpolation over validated pillars and values.

    Unlike ``lagrange_interpolate``, construction sorts the samples and
    rejects duplicate or non-finite entries. Queries must still lie strictly
    between the first and last pillar.
    """

    def __init__(self, pillars: Sequence[float], values: Sequence[float]):
        super().__init__(pillars, values)
        self.table = as_table(self.pillars, self.values)

    def interpolate(self, t: float) -> float:
        """Lagrange interpolation at t."""
        return lagrange_interpolate(self.table, t)
