"""
splinesuite: closed-form local interpolation of sampled data.

Natural and clamped cubic splines over scattered 1D points and bicubic
splines over uniform 2D grids. Fit once, then evaluate cheaply at arbitrary
query points.
"""

# Import main sub-packages
from . import libsplinesuite
from .libsplinesuite import (
    BicubicSplineInterpolator,
    CubicSplineInterpolator,
    InvalidDomain,
    NonuniformGrid,
    OutOfDomain,
    SplineError,
)

__version__ = "0.1.0"

__all__ = [
    "libsplinesuite",
    "BicubicSplineInterpolator",
    "CubicSplineInterpolator",
    "InvalidDomain",
    "NonuniformGrid",
    "OutOfDomain",
    "SplineError",
]
