"""libsplinesuite sub-package: spline engines and their supporting utilities."""

# Import modules themselves (allows: from splinesuite.libsplinesuite import spliner)
from . import bicubic
from . import constants
from . import domain
from . import errors
from . import logger
from . import nrutils
from . import sampler
from . import spliner

from .bicubic import BicubicSplineInterpolator, rescale_2D
from .domain import Domain1D, Domain2D
from .errors import InvalidDomain, NonuniformGrid, OutOfDomain, SplineError
from .nrutils import findcell
from .sampler import sample_1D, sample_2D
from .spliner import CubicSplineInterpolator, rescale_1D

__all__ = [
    "bicubic",
    "constants",
    "domain",
    "errors",
    "logger",
    "nrutils",
    "sampler",
    "spliner",
    "BicubicSplineInterpolator",
    "CubicSplineInterpolator",
    "Domain1D",
    "Domain2D",
    "InvalidDomain",
    "NonuniformGrid",
    "OutOfDomain",
    "SplineError",
    "findcell",
    "rescale_1D",
    "rescale_2D",
    "sample_1D",
    "sample_2D",
]
