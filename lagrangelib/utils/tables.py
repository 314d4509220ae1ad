"""Helpers for assembling (x, y) sample tables."""

from __future__ import annotations

from typing import Callable, Iterable, List, Sequence, Tuple

from ..interpolation.errors import InvalidTableError


def as_table(xs: Sequence[float], ys: Sequence[float]) -> List[Tuple[float, float]]:
    """Pair abscissae with ordinates, preserving order."""
    if len(xs) != len(ys):
        raise InvalidTableError(
            f"xs and ys must have same length, got {len(xs)} and {len(ys)}"
        )
    return [(float(x), float(y)) for x, y in zip(xs, ys)]


def tabulate(func: Callable[[float], float], xs: Iterable[float]) -> List[Tuple[float, float]]:
    """
    Sample ``func`` at each of ``xs``.

    Parameters
    ----------
    func : Callable[[float], float]
        Function to sample, e.g. ``math.sin``
    xs : Iterable[float]
        Abscissae, which should already be strictly increasing

    Returns
    -------
    List[Tuple[float, float]]
        ``(x, func(x))`` pairs in the order given
    """
    return [(float(x), float(func(x))) for x in xs]
