"""
Exception taxonomy for spline construction and evaluation.

Every error derives from :class:`SplineError` and from :class:`ValueError`,
so callers may catch either the specific condition or the generic
``ValueError`` raised by NumPy-style code.
"""

from typing import Optional


class SplineError(Exception):
    """Base class for all splinesuite errors."""


class InvalidDomain(SplineError, ValueError):
    """Coordinates or values cannot define an interpolator.

    Raised at construction for too few points, coordinates that are not
    strictly increasing, mismatched array shapes or non-finite input.
    """


class NonuniformGrid(SplineError, ValueError):
    """A bicubic grid axis is not evenly spaced."""

    def __init__(self, axis: str, deviation: float, tolerance: float) -> None:
        self.axis = axis
        self.deviation = float(deviation)
        self.tolerance = float(tolerance)
        super().__init__(
            f"grid spacing along axis {axis} must be uniform "
            f"(max second difference {self.deviation:.3e} > {self.tolerance:.3e})"
        )


class OutOfDomain(SplineError, ValueError):
    """Query point lies outside the fitted range with bounds enforcement on."""

    def __init__(
        self,
        value: float,
        lower: float,
        upper: float,
        axis: Optional[str] = None,
    ) -> None:
        self.value = value
        self.lower = float(lower)
        self.upper = float(upper)
        self.axis = axis
        where = f" along axis {axis}" if axis is not None else ""
        super().__init__(
            f"{value!r} is outside the interpolation range "
            f"[{self.lower!r}, {self.upper!r}]{where}; "
            "pass bounds=False to extrapolate"
        )
