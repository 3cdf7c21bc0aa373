"""
Array utilities shared by the spline engines.

Provides the cell locator used by every interpolator (binary search over a
strictly increasing sequence) and the monotonicity / uniform-spacing checks
used by the domain objects.
"""

from typing import Tuple

import numpy as np
from numba import njit


# ===================================================================
#  Cell location (binary search)
# ===================================================================

@njit(cache=True)
def findcell(xx, x):
    """
    Find the index i of the interval [xx[i], xx[i+1]] that contains x.

    Uses binary search. The result is clamped to ``[0, len(xx) - 2]`` so it
    is always a valid interval index: points left of ``xx[0]`` map to the
    first interval, points at or right of ``xx[-1]`` map to the last one.

    Parameters
    ----------
    xx : ndarray
        Strictly increasing 1D array with at least two entries
    x : float
        Value to locate

    Returns
    -------
    int
        Largest i with xx[i] <= x, clamped to the valid interval range
    """
    n = len(xx)
    if x < xx[1]:
        return 0
    if x >= xx[n - 2]:
        return n - 2

    jl = 1
    ju = n - 2
    while ju - jl > 1:
        jm = (ju + jl) // 2
        if x >= xx[jm]:
            jl = jm
        else:
            ju = jm
    return jl


@njit(cache=True)
def findcells(xx, xs):
    """Vectorised :func:`findcell` over a 1D array of query points."""
    out = np.empty(xs.size, dtype=np.int64)
    for k in range(xs.size):
        out[k] = findcell(xx, xs[k])
    return out


# ===================================================================
#  Coordinate checks
# ===================================================================

def ifirst_nonincreasing(x: np.ndarray) -> int:
    """Index of the first step ``x[i+1] <= x[i]`` (0-based), or -1 when none."""
    locs = np.flatnonzero(np.diff(x) <= 0.0)
    if locs.size == 0:
        return -1
    return int(locs[0])


def max_second_difference(x: np.ndarray) -> Tuple[float, float]:
    """
    Largest absolute second difference of *x* and the uniformity tolerance scale.

    Returns
    -------
    deviation : float
        ``max |x[i+1] - 2 x[i] + x[i-1]|`` (0 for fewer than 3 points)
    scale : float
        ``max |x|``, the scale the relative tolerance is applied to
    """
    scale = float(np.max(np.abs(x)))
    if x.size < 3:
        return 0.0, scale
    return float(np.max(np.abs(np.diff(x, n=2)))), scale
