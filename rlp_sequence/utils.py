"""
Utility functions for resolving lattice point sequences.
"""

import operator
import numpy as np
from typing import Sequence


def round_half_away(x: float) -> int:
    """
    Round a non-negative float to the nearest integer, ties away from zero.

    Python's built-in ``round`` and ``np.round`` round ties to even, which
    would move lattice points such as ``2.5`` onto ``2`` instead of ``3``.

    Parameters
    ----------
    x : float
        Non-negative value to round.

    Returns
    -------
    int
        Nearest integer, with ties rounded up.

    Examples
    --------
    >>> round_half_away(12.5)
    13
    >>> round_half_away(12.49)
    12
    """
    f = np.floor(x)
    # x - f is exact here, so no spurious tie at x = 0.49999999999999994
    return int(f) + (1 if x - f >= 0.5 else 0)


def rounded_log2(n: int) -> int:
    """
    Compute ``round(log2(n))`` with ties away from zero.

    ``n = 0`` has no logarithm; it maps to 0 so that a single-element
    domain never enters the lattice sweep.

    Examples
    --------
    >>> rounded_log2(8)
    3
    >>> rounded_log2(100)
    7
    """
    if n <= 0:
        return 0
    return round_half_away(float(np.log2(float(n))))


def check_bound(value, name: str) -> int:
    """Coerce a range bound to ``int``, rejecting non-integers and negatives."""
    if isinstance(value, (bool, np.bool_)):
        raise TypeError(f"{name} must be an integer, got bool")
    try:
        value = operator.index(value)
    except TypeError:
        raise TypeError(
            f"{name} must be an integer, got {type(value).__name__}"
        ) from None
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


def compute_separation_radius(values: Sequence[int]) -> float:
    """
    Compute the separation radius (half of the minimum pairwise gap).

    In one dimension the closest pair is always adjacent after sorting, so
    this runs in O(n log n) rather than the O(n^2) pairwise scan needed in
    higher dimensions.

    Parameters
    ----------
    values : Sequence[int]
        Emitted values, in any order.

    Returns
    -------
    float
        Separation radius, ``inf`` for fewer than two values.
    """
    pts = np.sort(np.asarray(values, dtype=np.float64))
    if pts.shape[0] < 2:
        return np.inf
    return 0.5 * float(np.min(np.diff(pts)))


def compute_covering_radius(values: Sequence[int], start: int, end: int) -> float:
    """
    Compute the covering (fill) radius of ``values`` over ``[start, end]``.

    This is the largest distance from any integer of the closed domain to
    its nearest emitted value.

    Parameters
    ----------
    values : Sequence[int]
        Emitted values, all inside ``[start, end]``.
    start, end : int
        Closed domain bounds.

    Returns
    -------
    float
        Covering radius, ``inf`` when ``values`` is empty.
    """
    pts = np.sort(np.asarray(values, dtype=np.float64))
    if pts.shape[0] == 0:
        return np.inf
    if pts[0] < start or pts[-1] > end:
        raise ValueError(f"values must lie within [{start}, {end}]")

    # Interior gaps are covered from both sides, the ends only from one.
    gaps = np.diff(pts)
    interior = float(np.max(np.floor(gaps / 2))) if gaps.size else 0.0
    return max(interior, float(pts[0] - start), float(end - pts[-1]))


def compute_mesh_ratio(values: Sequence[int], start: int, end: int) -> float:
    """
    Compute the mesh ratio ``covering_radius / separation_radius``.

    An evenly spread prefix has mesh ratio close to 1; clustered prefixes
    grow it.

    Returns
    -------
    float
        Mesh ratio, ``inf`` for fewer than two distinct values.
    """
    q = compute_separation_radius(values)
    if q == 0 or not np.isfinite(q):
        return np.inf
    return compute_covering_radius(values, start, end) / q
