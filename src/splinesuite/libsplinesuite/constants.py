"""
Numerical constants and configuration defaults for splinesuite.

All values are module-level so they can be imported directly::

    from splinesuite.libsplinesuite.constants import UNIFORM_RTOL
"""
import numpy as np

# Project-wide precision alias
dp = np.float64

# Minimum number of knots (1-D) or grid lines per axis (2-D).
# Clamped splines are well posed from 2 knots, natural ones need an interior
# knot; both variants use the same floor so the contract does not depend on
# the boundary condition.
MIN_NODES = 3

# Relative tolerance on second differences for the uniform-grid check,
# scaled by max(|coordinate|) along the axis.
UNIFORM_RTOL = dp(1e-8)

# Hermite basis change mapping corner values/derivatives to the local
# bicubic power basis: alpha = A @ F @ A.T
HERMITE_BASIS = np.array(
    [
        [1.0, 0.0, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
        [-3.0, 3.0, -2.0, -1.0],
        [2.0, -2.0, 1.0, 1.0],
    ],
    dtype=dp,
)
HERMITE_BASIS.setflags(write=False)
