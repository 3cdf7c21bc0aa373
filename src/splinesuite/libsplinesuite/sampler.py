"""
Evenly spaced sampling of user functions.

The interpolators' ``from_function`` factories use these helpers to tabulate
a callable before delegating to the array-based constructors. Functions are
called one point at a time, so they need not accept arrays.
"""

from numbers import Integral
from typing import Callable, Tuple

import numpy as np

from .constants import MIN_NODES, dp
from .errors import InvalidDomain
from .logger import get_logger

log = get_logger(__name__)


def _point_count(n, name: str) -> int:
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise InvalidDomain(f"{name} must be an integer point count, got {n!r}")
    if n < MIN_NODES:
        raise InvalidDomain(f"{name} must be at least {MIN_NODES}, got {n}")
    return int(n)


def _axis(a: float, b: float, n: int, name: str) -> np.ndarray:
    if not (np.isfinite(a) and np.isfinite(b)):
        raise InvalidDomain(f"range along axis {name} must be finite, got [{a!r}, {b!r}]")
    if not a < b:
        raise InvalidDomain(f"range along axis {name} must satisfy a < b, got [{a!r}, {b!r}]")
    return np.linspace(a, b, n, dtype=dp)


def sample_1D(f: Callable[[float], float], xa: float, xb: float, n: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Tabulate ``f`` at ``n`` evenly spaced points of ``[xa, xb]``.

    Parameters
    ----------
    f : callable
        Function of one float
    xa, xb : float
        Range, ``xa < xb``
    n : int
        Number of samples, at least ``MIN_NODES``

    Returns
    -------
    x : ndarray
        Sample coordinates, ``linspace(xa, xb, n)``
    y : ndarray
        ``f(x[i])`` for every i
    """
    n = _point_count(n, "n")
    x = _axis(xa, xb, n, "x")
    y = np.array([f(float(xi)) for xi in x], dtype=dp)
    log.debug("sampled %s at %d points on [%g, %g]", getattr(f, "__name__", f), n, xa, xb)
    return x, y


def sample_2D(
    f: Callable[[float, float], float],
    xa: float, xb: float, nx: int,
    ya: float, yb: float, ny: int,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Tabulate ``f(x, y)`` on an ``nx`` by ``ny`` evenly spaced grid.

    Returns
    -------
    x : ndarray, shape (nx,)
    y : ndarray, shape (ny,)
    Z : ndarray, shape (nx, ny)
        ``Z[i, j] = f(x[i], y[j])``
    """
    nx = _point_count(nx, "nx")
    ny = _point_count(ny, "ny")
    x = _axis(xa, xb, nx, "x")
    y = _axis(ya, yb, ny, "y")
    Z = np.empty((nx, ny), dtype=dp)
    for i in range(nx):
        for j in range(ny):
            Z[i, j] = f(float(x[i]), float(y[j]))
    log.debug(
        "sampled %s on %dx%d grid [%g, %g] x [%g, %g]",
        getattr(f, "__name__", f), nx, ny, xa, xb, ya, yb,
    )
    return x, y, Z
