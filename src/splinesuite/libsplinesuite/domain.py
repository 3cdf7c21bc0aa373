"""
Validated coordinate containers for the spline engines.

:class:`Domain1D` holds the knots and values of a curve, :class:`Domain2D`
the axes and value matrix of a regular grid. Both copy their input to
read-only ``float64`` arrays and cache the bounds, so they are the single
source of truth for "is this query inside the range".
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .constants import MIN_NODES, UNIFORM_RTOL, dp
from .errors import InvalidDomain, NonuniformGrid, OutOfDomain
from .logger import get_logger
from .nrutils import ifirst_nonincreasing, max_second_difference

log = get_logger(__name__)


def _frozen(a, name: str) -> np.ndarray:
    """Fresh C-contiguous float64 copy that cannot be written to."""
    try:
        out = np.array(a, dtype=dp, copy=True, order="C")
    except (TypeError, ValueError) as err:
        raise InvalidDomain(f"{name} cannot be converted to a float array: {err}") from err
    out.setflags(write=False)
    return out


def _check_axis(name: str, x: np.ndarray) -> None:
    if x.ndim != 1:
        raise InvalidDomain(f"coordinates along axis {name} must be 1-dimensional, got shape {x.shape}")
    if x.size < MIN_NODES:
        raise InvalidDomain(
            f"cubic interpolation requires at least {MIN_NODES} points along axis {name}, got {x.size}"
        )
    if not np.all(np.isfinite(x)):
        raise InvalidDomain(f"coordinates along axis {name} must be finite")
    i = ifirst_nonincreasing(x)
    if i >= 0:
        log.debug("rejecting axis %s: x[%d]=%r, x[%d]=%r", name, i, float(x[i]), i + 1, float(x[i + 1]))
        raise InvalidDomain(
            f"coordinates along axis {name} must be strictly increasing "
            f"(x[{i}]={float(x[i])!r}, x[{i + 1}]={float(x[i + 1])!r})"
        )


def _check_uniform(name: str, x: np.ndarray, rtol: float) -> None:
    deviation, scale = max_second_difference(x)
    tolerance = rtol * scale
    if deviation > tolerance:
        log.debug("rejecting axis %s: second difference %.3e > %.3e", name, deviation, tolerance)
        raise NonuniformGrid(name, deviation, tolerance)


def enforce_bounds(value: float, lower: float, upper: float, axis: str | None = None) -> None:
    """Raise :class:`OutOfDomain` unless ``lower <= value <= upper``.

    NaN never satisfies the comparison and is rejected as well.
    """
    if not (lower <= value <= upper):
        raise OutOfDomain(value, lower, upper, axis)


@dataclass(frozen=True, eq=False)
class Domain1D:
    """
    Ordered knots ``x`` with paired values ``y``.

    Parameters
    ----------
    x : array_like
        Strictly increasing coordinates, at least ``MIN_NODES`` of them
    y : array_like
        Values at the coordinates, same length as ``x``

    Raises
    ------
    InvalidDomain
        Too few points, non-increasing or non-finite coordinates,
        non-finite values, or mismatched lengths.
    """

    x: np.ndarray
    y: np.ndarray
    xa: float = field(init=False)
    xb: float = field(init=False)
    n: int = field(init=False)

    def __post_init__(self):
        x = _frozen(self.x, "coordinates along axis x")
        y = _frozen(self.y, "values")
        _check_axis("x", x)
        if y.shape != x.shape:
            raise InvalidDomain(f"values must match coordinates: got {y.shape} values for {x.shape} coordinates")
        if not np.all(np.isfinite(y)):
            raise InvalidDomain("values must be finite")
        # frozen dataclass: bypass __setattr__ for the normalised fields
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)
        object.__setattr__(self, "xa", float(x[0]))
        object.__setattr__(self, "xb", float(x[-1]))
        object.__setattr__(self, "n", int(x.size))

    def contains(self, x: float) -> bool:
        return self.xa <= x <= self.xb

    def enforce(self, x: float) -> None:
        enforce_bounds(x, self.xa, self.xb)


@dataclass(frozen=True, eq=False)
class Domain2D:
    """
    Regular grid with axes ``x`` (length ``nx``), ``y`` (length ``ny``) and
    values ``Z`` of shape ``(nx, ny)``, ``Z[i, j]`` taken at ``(x[i], y[j])``.

    Both axes must be strictly increasing and evenly spaced: every second
    difference must stay within ``rtol * max(|axis|)``.

    Raises
    ------
    InvalidDomain
        Fewer than ``MIN_NODES`` points on an axis, bad ordering, wrong
        ``Z`` shape, non-finite input, or a negative or non-finite ``rtol``.
    NonuniformGrid
        An axis is not evenly spaced.
    """

    x: np.ndarray
    y: np.ndarray
    Z: np.ndarray
    rtol: float = UNIFORM_RTOL
    xa: float = field(init=False)
    xb: float = field(init=False)
    ya: float = field(init=False)
    yb: float = field(init=False)
    nx: int = field(init=False)
    ny: int = field(init=False)

    def __post_init__(self):
        if not (np.isfinite(self.rtol) and self.rtol >= 0.0):
            raise InvalidDomain(f"uniform-spacing tolerance must be finite and non-negative, got {self.rtol!r}")
        x = _frozen(self.x, "coordinates along axis x")
        y = _frozen(self.y, "coordinates along axis y")
        Z = _frozen(self.Z, "values")
        _check_axis("x", x)
        _check_axis("y", y)
        if Z.shape != (x.size, y.size):
            raise InvalidDomain(f"values must have shape {(x.size, y.size)}, got {Z.shape}")
        if not np.all(np.isfinite(Z)):
            raise InvalidDomain("values must be finite")
        _check_uniform("x", x, self.rtol)
        _check_uniform("y", y, self.rtol)
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)
        object.__setattr__(self, "Z", Z)
        object.__setattr__(self, "xa", float(x[0]))
        object.__setattr__(self, "xb", float(x[-1]))
        object.__setattr__(self, "ya", float(y[0]))
        object.__setattr__(self, "yb", float(y[-1]))
        object.__setattr__(self, "nx", int(x.size))
        object.__setattr__(self, "ny", int(y.size))

    def contains(self, x: float, y: float) -> bool:
        return self.xa <= x <= self.xb and self.ya <= y <= self.yb

    def enforce(self, x: float, y: float) -> None:
        enforce_bounds(x, self.xa, self.xb, "x")
        enforce_bounds(y, self.ya, self.yb, "y")
