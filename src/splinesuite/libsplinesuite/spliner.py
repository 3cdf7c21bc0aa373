"""
Cubic spline interpolation of scattered 1D data.

Builds natural or clamped piecewise cubics through an ordered set of knots by
solving the tridiagonal system for the quadratic coefficients (Burden &
Faires, *Numerical Analysis*, algorithms 3.4 and 3.5). Each interval i
stores the coefficients of

    f(x) = a[i] + b[i]*dx + c[i]*dx**2 + d[i]*dx**3,    dx = x - x[i]

so evaluation is a binary search plus a Horner step.
"""

from __future__ import annotations

from typing import Callable, Optional

import numpy as np
from numba import njit

from .constants import dp
from .domain import Domain1D
from .errors import InvalidDomain, OutOfDomain
from .logger import get_logger
from .nrutils import findcell
from .sampler import sample_1D

log = get_logger(__name__)


# ===================================================================
#  Kernels
# ===================================================================

@njit(cache=True)
def _spline_coefficients(x, y, clamped, dy1, dyn):
    """
    Solve the spline system and return the (4, n-1) coefficient table.

    Parameters
    ----------
    x : ndarray
        Strictly increasing knots, n >= 3
    y : ndarray
        Values at the knots
    clamped : bool
        False for natural (zero curvature) ends, True for prescribed slopes
    dy1, dyn : float
        End slopes, ignored for natural splines

    Returns
    -------
    ndarray
        Rows a, b, c, d; column i belongs to [x[i], x[i+1]]
    """
    n = x.size
    h = np.empty(n - 1)
    for i in range(n - 1):
        h[i] = x[i + 1] - x[i]

    alpha = np.zeros(n)
    for i in range(1, n - 1):
        alpha[i] = 3.0 * (y[i + 1] - y[i]) / h[i] - 3.0 * (y[i] - y[i - 1]) / h[i - 1]

    diag = np.zeros(n)
    mu = np.zeros(n)
    z = np.zeros(n)
    c = np.zeros(n)

    if clamped:
        alpha[0] = 3.0 * (y[1] - y[0]) / h[0] - 3.0 * dy1
        alpha[n - 1] = 3.0 * dyn - 3.0 * (y[n - 1] - y[n - 2]) / h[n - 2]
        diag[0] = 2.0 * h[0]
        mu[0] = 0.5
        z[0] = alpha[0] / diag[0]
    else:
        diag[0] = 1.0

    # forward elimination
    for i in range(1, n - 1):
        diag[i] = 2.0 * (x[i + 1] - x[i - 1]) - h[i - 1] * mu[i - 1]
        mu[i] = h[i] / diag[i]
        z[i] = (alpha[i] - h[i - 1] * z[i - 1]) / diag[i]

    if clamped:
        diag[n - 1] = h[n - 2] * (2.0 - mu[n - 2])
        z[n - 1] = (alpha[n - 1] - h[n - 2] * z[n - 2]) / diag[n - 1]
        c[n - 1] = z[n - 1]

    # back substitution
    coef = np.empty((4, n - 1))
    for j in range(n - 2, -1, -1):
        c[j] = z[j] - mu[j] * c[j + 1]
        coef[0, j] = y[j]
        coef[1, j] = (y[j + 1] - y[j]) / h[j] - h[j] * (c[j + 1] + 2.0 * c[j]) / 3.0
        coef[2, j] = c[j]
        coef[3, j] = (c[j + 1] - c[j]) / (3.0 * h[j])
    return coef


@njit(cache=True)
def _seval(u, x, coef, nu):
    """Value (nu=0), slope (nu=1) or curvature (nu=2) of the spline at u."""
    i = findcell(x, u)
    t = u - x[i]
    if nu == 0:
        return coef[0, i] + t * (coef[1, i] + t * (coef[2, i] + t * coef[3, i]))
    if nu == 1:
        return coef[1, i] + t * (2.0 * coef[2, i] + 3.0 * t * coef[3, i])
    return 2.0 * coef[2, i] + 6.0 * t * coef[3, i]


@njit(cache=True)
def _seval_many(us, x, coef, nu):
    out = np.empty(us.size)
    for k in range(us.size):
        out[k] = _seval(us[k], x, coef, nu)
    return out


# ===================================================================
#  Interpolator
# ===================================================================

class CubicSplineInterpolator:
    """
    Piecewise cubic interpolant with continuous first and second derivatives.

    ``CubicSplineInterpolator(x, y)`` builds a natural spline (zero second
    derivative at both ends). ``CubicSplineInterpolator(x, y, dy1, dyn)``
    builds a clamped spline whose end slopes are ``dy1`` and ``dyn``.

    At least 3 knots are required for both variants.

    Parameters
    ----------
    x : array_like
        Strictly increasing knots
    y : array_like
        Values at the knots
    dy1, dyn : float, optional
        First derivative at ``x[0]`` and ``x[-1]``; give both or neither

    Raises
    ------
    InvalidDomain
        Invalid knots or values, or non-finite end slopes.

    Examples
    --------
    >>> spl = CubicSplineInterpolator([0, 1, 2, 3], [0, 1, 0, 1])
    >>> spl(1.0)
    1.0
    >>> spl(4.0, bounds=False)  # extrapolate the last cubic
    """

    __slots__ = ("_domain", "_coef", "_boundary")

    def __init__(self, x, y, dy1: Optional[float] = None, dyn: Optional[float] = None):
        if (dy1 is None) != (dyn is None):
            raise ValueError("a clamped spline needs both end slopes dy1 and dyn")
        domain = Domain1D(x, y)
        clamped = dy1 is not None
        if clamped:
            dy1, dyn = float(dy1), float(dyn)
            if not (np.isfinite(dy1) and np.isfinite(dyn)):
                raise InvalidDomain(f"end slopes must be finite, got dy1={dy1!r}, dyn={dyn!r}")
        else:
            dy1 = dyn = 0.0

        coef = _spline_coefficients(domain.x, domain.y, clamped, dy1, dyn)
        coef.setflags(write=False)

        self._domain = domain
        self._coef = coef
        self._boundary = "clamped" if clamped else "natural"
        log.debug(
            "fitted %s cubic spline through %d knots on [%g, %g]",
            self._boundary, domain.n, domain.xa, domain.xb,
        )

    @classmethod
    def from_function(
        cls,
        f: Callable[[float], float],
        xa: float,
        xb: float,
        n: int,
        dy1: Optional[float] = None,
        dyn: Optional[float] = None,
    ) -> "CubicSplineInterpolator":
        """
        Spline through ``n`` evenly spaced samples of ``f`` on ``[xa, xb]``.

        A natural spline is built unless both end slopes are given.
        """
        x, y = sample_1D(f, xa, xb, n)
        return cls(x, y, dy1, dyn)

    # ---------------- accessors --------------------
    @property
    def x(self) -> np.ndarray:
        return self._domain.x

    @property
    def y(self) -> np.ndarray:
        return self._domain.y

    @property
    def xa(self) -> float:
        return self._domain.xa

    @property
    def xb(self) -> float:
        return self._domain.xb

    @property
    def n(self) -> int:
        return self._domain.n

    @property
    def coefficients(self) -> np.ndarray:
        """Read-only (4, n-1) table; rows a, b, c, d."""
        return self._coef

    @property
    def boundary(self) -> str:
        """``"natural"`` or ``"clamped"``."""
        return self._boundary

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(n={self.n}, range=[{self.xa:g}, {self.xb:g}], "
            f"boundary={self._boundary!r})"
        )

    # ---------------- evaluation --------------------
    def _check(self, x: float, bounds: bool) -> None:
        if bounds:
            self._domain.enforce(x)
        elif not self._domain.contains(x):
            log.debug2("extrapolating spline at x=%r outside [%g, %g]", x, self.xa, self.xb)

    def __call__(self, x, bounds: bool = True):
        """
        Evaluate the spline.

        Parameters
        ----------
        x : float or array_like
            Query point(s); arrays are forwarded to :meth:`evaluate`
        bounds : bool, optional
            Raise :class:`OutOfDomain` for points outside ``[xa, xb]``
            (default). With ``False`` the end cubic is extrapolated.
        """
        if np.ndim(x) > 0:
            return self.evaluate(x, bounds)
        x = float(x)
        self._check(x, bounds)
        return float(_seval(x, self._domain.x, self._coef, 0))

    def derivative(self, x, order: int = 1, bounds: bool = True):
        """First (``order=1``) or second (``order=2``) derivative at x."""
        if order not in (1, 2):
            raise ValueError(f"derivative order must be 1 or 2, got {order!r}")
        if np.ndim(x) > 0:
            return self.evaluate(x, bounds, order)
        x = float(x)
        self._check(x, bounds)
        return float(_seval(x, self._domain.x, self._coef, order))

    def evaluate(self, xs, bounds: bool = True, nu: int = 0) -> np.ndarray:
        """
        Evaluate the spline (or its ``nu``-th derivative) at every element of xs.

        Returns an array with the shape of ``xs``.
        """
        if nu not in (0, 1, 2):
            raise ValueError(f"derivative order must be 0, 1 or 2, got {nu!r}")
        xs = np.asarray(xs, dtype=dp)
        flat = np.ascontiguousarray(xs.ravel())
        inside = (flat >= self.xa) & (flat <= self.xb)
        if not np.all(inside):
            k = int(np.flatnonzero(~inside)[0])
            if bounds:
                raise OutOfDomain(float(flat[k]), self.xa, self.xb)
            log.debug2("extrapolating spline at %d of %d points", int(np.count_nonzero(~inside)), flat.size)
        return _seval_many(flat, self._domain.x, self._coef, nu).reshape(xs.shape)


# ===================================================================
#  Resampling
# ===================================================================

def rescale_1D(x0, y0, x1, fill: float = 0.0) -> np.ndarray:
    """
    Rescale a 1D array from one grid to another.

    Fits a natural cubic spline to ``(x0, y0)`` and evaluates it on ``x1``.

    Parameters
    ----------
    x0 : array_like
        Original, strictly increasing coordinates
    y0 : array_like
        Original values
    x1 : array_like
        New coordinates, any shape
    fill : float, optional
        Value for points of ``x1`` outside ``[x0[0], x0[-1]]`` (default 0)

    Returns
    -------
    ndarray
        Values on ``x1``
    """
    spl = CubicSplineInterpolator(x0, y0)
    x1 = np.asarray(x1, dtype=dp)
    out = np.full(x1.shape, fill, dtype=dp)
    inside = (x1 >= spl.xa) & (x1 <= spl.xb)
    out[inside] = spl.evaluate(x1[inside])
    return out
