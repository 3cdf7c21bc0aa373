"""
Bicubic spline interpolation on a uniform 2D grid.

Node derivatives are estimated by finite differences (central inside the
grid, three-point one-sided on the edges), the mixed derivative by
differencing ``dZ/dx`` along y. For every cell the 16 corner quantities are
mapped to power-basis coefficients with the Hermite transform
``alpha = A @ F @ A.T``, so that inside the cell

    f(x, y) = sum_{p,q} alpha[p, q] * t**p * u**q

with ``t``, ``u`` the cell-normalised offsets in [0, 1]. Derivatives are kept
in grid-index units, which is what the normalised coordinates require.
"""

from __future__ import annotations

from typing import Callable, Tuple

import numpy as np

from .constants import HERMITE_BASIS, UNIFORM_RTOL, dp
from .domain import Domain2D
from .errors import OutOfDomain
from .logger import get_logger
from .nrutils import findcell, findcells
from .sampler import sample_2D

log = get_logger(__name__)


# ===================================================================
#  Coefficient construction
# ===================================================================

def _grid_derivative(V: np.ndarray, axis: int) -> np.ndarray:
    """
    Derivative of V along *axis* per grid step.

    Central differences ``(V[k+1] - V[k-1]) / 2`` at interior nodes and
    ``-3/2 V[0] + 2 V[1] - 1/2 V[2]`` (mirrored at the far edge) on the
    boundary. Requires at least 3 nodes along *axis*.
    """
    D = np.empty(V.shape, dtype=dp)
    v = np.moveaxis(V, axis, 0)
    d = np.moveaxis(D, axis, 0)
    d[1:-1] = (v[2:] - v[:-2]) / 2.0
    d[0] = -1.5 * v[0] + 2.0 * v[1] - 0.5 * v[2]
    d[-1] = 0.5 * v[-3] - 2.0 * v[-2] + 1.5 * v[-1]
    return D


def bcucof(Z: np.ndarray) -> np.ndarray:
    """
    Compute the bicubic coefficients of every cell of the grid values Z.

    Parameters
    ----------
    Z : ndarray
        Values on a uniform grid, shape (nx, ny), nx, ny >= 3

    Returns
    -------
    ndarray
        Coefficients, shape (nx-1, ny-1, 4, 4); ``alpha[i, j, p, q]``
        multiplies ``t**p * u**q`` in cell (i, j)
    """
    nx, ny = Z.shape
    dx = _grid_derivative(Z, 0)
    dy = _grid_derivative(Z, 1)
    dxy = _grid_derivative(dx, 1)

    # F rows: Z(i), Z(i+1), dx(i), dx(i+1)
    # F cols: value(j), value(j+1), d/dy(j), d/dy(j+1)
    F = np.empty((nx - 1, ny - 1, 4, 4), dtype=dp)
    corners = ((Z, dy, 0), (Z, dy, 1), (dx, dxy, 0), (dx, dxy, 1))
    for row, (val, der, di) in enumerate(corners):
        rows = slice(di, nx - 1 + di)
        F[:, :, row, 0] = val[rows, :-1]
        F[:, :, row, 1] = val[rows, 1:]
        F[:, :, row, 2] = der[rows, :-1]
        F[:, :, row, 3] = der[rows, 1:]

    return HERMITE_BASIS @ F @ HERMITE_BASIS.T


def bcuval(c: np.ndarray, t: float, u: float) -> float:
    """Value of the cell polynomial with coefficients c at normalised (t, u)."""
    ansy = 0.0
    for i in range(3, -1, -1):
        ansy = t * ansy + ((c[i, 3] * u + c[i, 2]) * u + c[i, 1]) * u + c[i, 0]
    return ansy


def bcuint(c: np.ndarray, t: float, u: float) -> Tuple[float, float, float]:
    """
    Value and normalised partial derivatives of one cell polynomial.

    Returns
    -------
    tuple
        (f, df/dt, df/du); divide the derivatives by the cell widths to get
        physical partials
    """
    ansy = 0.0
    ansy1 = 0.0
    ansy2 = 0.0
    for i in range(3, -1, -1):
        ansy = t * ansy + ((c[i, 3] * u + c[i, 2]) * u + c[i, 1]) * u + c[i, 0]
        ansy2 = t * ansy2 + (3.0 * c[i, 3] * u + 2.0 * c[i, 2]) * u + c[i, 1]
        ansy1 = u * ansy1 + (3.0 * c[3, i] * t + 2.0 * c[2, i]) * t + c[1, i]
    return ansy, ansy1, ansy2


# ===================================================================
#  Interpolator
# ===================================================================

class BicubicSplineInterpolator:
    """
    C1 piecewise-bicubic surface through values on a uniform grid.

    Parameters
    ----------
    x : array_like
        Evenly spaced, strictly increasing coordinates along axis 0 (nx >= 3)
    y : array_like
        Evenly spaced, strictly increasing coordinates along axis 1 (ny >= 3)
    Z : array_like
        Values, shape (nx, ny), ``Z[i, j]`` at ``(x[i], y[j])``
    rtol : float, optional
        Relative tolerance of the uniform-spacing check

    Raises
    ------
    InvalidDomain
        Too few grid lines, bad ordering, wrong shape, non-finite data, or
        a negative or non-finite ``rtol``.
    NonuniformGrid
        Either axis is not evenly spaced.

    Examples
    --------
    >>> x = y = np.linspace(0.0, 1.0, 4)
    >>> surf = BicubicSplineInterpolator(x, y, np.add.outer(x, y))
    >>> round(surf(0.25, 0.5), 12)
    0.75
    """

    __slots__ = ("_grid", "_coef")

    def __init__(self, x, y, Z, rtol: float = UNIFORM_RTOL):
        grid = Domain2D(x, y, Z, rtol)
        coef = bcucof(grid.Z)
        coef.setflags(write=False)
        self._grid = grid
        self._coef = coef
        log.debug(
            "fitted bicubic spline on %dx%d grid [%g, %g] x [%g, %g]",
            grid.nx, grid.ny, grid.xa, grid.xb, grid.ya, grid.yb,
        )

    @classmethod
    def from_function(
        cls,
        f: Callable[[float, float], float],
        xa: float, xb: float, nx: int,
        ya: float, yb: float, ny: int,
    ) -> "BicubicSplineInterpolator":
        """
        Surface through ``f`` sampled on ``nx`` evenly spaced points of
        ``[xa, xb]`` by ``ny`` evenly spaced points of ``[ya, yb]``.
        """
        x, y, Z = sample_2D(f, xa, xb, nx, ya, yb, ny)
        return cls(x, y, Z)

    # ---------------- accessors --------------------
    @property
    def x(self) -> np.ndarray:
        return self._grid.x

    @property
    def y(self) -> np.ndarray:
        return self._grid.y

    @property
    def Z(self) -> np.ndarray:
        return self._grid.Z

    @property
    def xa(self) -> float:
        return self._grid.xa

    @property
    def xb(self) -> float:
        return self._grid.xb

    @property
    def ya(self) -> float:
        return self._grid.ya

    @property
    def yb(self) -> float:
        return self._grid.yb

    @property
    def nx(self) -> int:
        return self._grid.nx

    @property
    def ny(self) -> int:
        return self._grid.ny

    @property
    def coefficients(self) -> np.ndarray:
        """Read-only (nx-1, ny-1, 4, 4) array of cell coefficients."""
        return self._coef

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(nx={self.nx}, ny={self.ny}, "
            f"range=[{self.xa:g}, {self.xb:g}] x [{self.ya:g}, {self.yb:g}])"
        )

    # ---------------- evaluation --------------------
    def _locate(self, x: float, y: float, bounds: bool):
        if bounds:
            self._grid.enforce(x, y)
        elif not self._grid.contains(x, y):
            log.debug2("extrapolating surface at (%r, %r)", x, y)
        xg = self._grid.x
        yg = self._grid.y
        i = findcell(xg, x)
        j = findcell(yg, y)
        hx = xg[i + 1] - xg[i]
        hy = yg[j + 1] - yg[j]
        return i, j, (x - xg[i]) / hx, (y - yg[j]) / hy, hx, hy

    def __call__(self, x, y, bounds: bool = True):
        """
        Evaluate the surface at (x, y).

        Parameters
        ----------
        x, y : float or array_like
            Query coordinates; arrays are forwarded to :meth:`evaluate`
        bounds : bool, optional
            Raise :class:`OutOfDomain` when either coordinate is outside its
            axis range (default). With ``False`` the edge cell is extrapolated.
        """
        if np.ndim(x) > 0 or np.ndim(y) > 0:
            return self.evaluate(x, y, bounds)
        i, j, t, u, _, _ = self._locate(float(x), float(y), bounds)
        return float(bcuval(self._coef[i, j], t, u))

    def gradient(self, x: float, y: float, bounds: bool = True) -> Tuple[float, float, float]:
        """
        Surface value and physical partial derivatives at (x, y).

        Returns
        -------
        tuple
            (f, df/dx, df/dy)
        """
        i, j, t, u, hx, hy = self._locate(float(x), float(y), bounds)
        f, ft, fu = bcuint(self._coef[i, j], t, u)
        return float(f), float(ft / hx), float(fu / hy)

    def evaluate(self, xs, ys, bounds: bool = True) -> np.ndarray:
        """
        Evaluate the surface element-wise at broadcast arrays xs, ys.

        Returns an array with the broadcast shape of the inputs.
        """
        xs, ys = np.broadcast_arrays(np.asarray(xs, dtype=dp), np.asarray(ys, dtype=dp))
        shape = xs.shape
        xf = np.ascontiguousarray(xs.ravel())
        yf = np.ascontiguousarray(ys.ravel())
        g = self._grid
        for axis, q, lo, hi in (("x", xf, g.xa, g.xb), ("y", yf, g.ya, g.yb)):
            inside = (q >= lo) & (q <= hi)
            if np.all(inside):
                continue
            if bounds:
                k = int(np.flatnonzero(~inside)[0])
                raise OutOfDomain(float(q[k]), lo, hi, axis)
            log.debug2("extrapolating surface along %s at %d points", axis, int(np.count_nonzero(~inside)))

        i = findcells(g.x, xf)
        j = findcells(g.y, yf)
        t = (xf - g.x[i]) / (g.x[i + 1] - g.x[i])
        u = (yf - g.y[j]) / (g.y[j + 1] - g.y[j])
        T = np.stack([np.ones_like(t), t, t * t, t * t * t], axis=-1)
        U = np.stack([np.ones_like(u), u, u * u, u * u * u], axis=-1)
        vals = np.einsum("kp,kpq,kq->k", T, self._coef[i, j], U)
        return vals.reshape(shape)


# ===================================================================
#  Resampling
# ===================================================================

def rescale_2D(x0, y0, z0, x1, y1, fill: float = 0.0) -> np.ndarray:
    """
    Rescale a 2D array from one uniform grid to another grid.

    Fits a bicubic spline to ``z0`` on ``(x0, y0)`` and evaluates it on the
    tensor grid ``x1`` by ``y1``.

    Parameters
    ----------
    x0, y0 : array_like
        Original, evenly spaced axes
    z0 : array_like
        Original values, shape (len(x0), len(y0))
    x1, y1 : array_like
        New 1D axes
    fill : float, optional
        Value for nodes outside the original grid (default 0)

    Returns
    -------
    ndarray
        Values, shape (len(x1), len(y1))
    """
    surf = BicubicSplineInterpolator(x0, y0, z0)
    X1, Y1 = np.meshgrid(np.asarray(x1, dtype=dp), np.asarray(y1, dtype=dp), indexing="ij")
    out = np.full(X1.shape, fill, dtype=dp)
    inside = (X1 >= surf.xa) & (X1 <= surf.xb) & (Y1 >= surf.ya) & (Y1 <= surf.yb)
    out[inside] = surf.evaluate(X1[inside], Y1[inside])
    return out
