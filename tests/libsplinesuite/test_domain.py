"""Tests for domain — validated 1D/2D coordinate containers."""
import dataclasses

import numpy as np
import pytest

from splinesuite.libsplinesuite.domain import Domain1D, Domain2D, enforce_bounds
from splinesuite.libsplinesuite.errors import InvalidDomain, NonuniformGrid, OutOfDomain


class TestDomain1D:
    def test_cached_bounds(self):
        d = Domain1D([1, 2, 4, 8], [0, 1, 2, 3])
        assert (d.xa, d.xb, d.n) == (1.0, 8.0, 4)
        assert d.x.dtype == np.float64 and d.y.dtype == np.float64

    def test_arrays_are_read_only_copies(self):
        x = np.array([0.0, 1.0, 2.0])
        d = Domain1D(x, x**2)
        assert not d.x.flags.writeable
        assert not d.y.flags.writeable
        assert d.x is not x
        x[0] = -5.0
        assert d.xa == 0.0

    def test_frozen(self):
        d = Domain1D([0.0, 1.0, 2.0], [0.0, 1.0, 2.0])
        with pytest.raises(dataclasses.FrozenInstanceError):
            d.xa = 3.0

    def test_contains_and_enforce(self):
        d = Domain1D([0.0, 1.0, 2.0], [0.0, 1.0, 2.0])
        assert d.contains(0.0) and d.contains(2.0)
        assert not d.contains(2.0001)
        d.enforce(1.0)
        with pytest.raises(OutOfDomain):
            d.enforce(-1e-12)

    def test_error_message_names_offending_pair(self):
        with pytest.raises(InvalidDomain, match=r"x\[1\]=2.0, x\[2\]=2.0"):
            Domain1D([1.0, 2.0, 2.0, 3.0], [0.0, 0.0, 0.0, 0.0])


class TestDomain2D:
    def test_cached_bounds(self):
        x = np.linspace(0.0, 1.0, 3)
        y = np.linspace(-2.0, 2.0, 5)
        d = Domain2D(x, y, np.zeros((3, 5)))
        assert (d.xa, d.xb, d.ya, d.yb) == (0.0, 1.0, -2.0, 2.0)
        assert (d.nx, d.ny) == (3, 5)
        assert not d.Z.flags.writeable

    def test_contains_and_enforce(self):
        d = Domain2D([0.0, 1.0, 2.0], [0.0, 1.0, 2.0], np.zeros((3, 3)))
        assert d.contains(2.0, 0.0)
        assert not d.contains(2.0, 2.5)
        with pytest.raises(OutOfDomain) as err:
            d.enforce(1.0, 2.5)
        assert err.value.axis == "y"

    def test_ordering_checked_before_uniformity(self):
        with pytest.raises(InvalidDomain):
            Domain2D([0.0, 1.0, 3.0], [0.0, 2.0, 1.0], np.zeros((3, 3)))

    def test_nonuniform(self):
        with pytest.raises(NonuniformGrid) as err:
            Domain2D([0.0, 1.0, 3.0], [0.0, 1.0, 2.0], np.zeros((3, 3)))
        assert err.value.axis == "x"
        assert err.value.deviation == pytest.approx(1.0)
        assert err.value.tolerance == pytest.approx(3e-8)

    def test_nonuniform_is_not_invalid_domain(self):
        with pytest.raises(NonuniformGrid) as err:
            Domain2D([0.0, 1.0, 3.0], [0.0, 1.0, 2.0], np.zeros((3, 3)))
        assert not isinstance(err.value, InvalidDomain)
        assert isinstance(err.value, ValueError)


class TestEnforceBounds:
    def test_inclusive(self):
        enforce_bounds(0.0, 0.0, 1.0)
        enforce_bounds(1.0, 0.0, 1.0)

    @pytest.mark.parametrize("value", [-0.1, 1.1, np.nan])
    def test_outside(self, value):
        with pytest.raises(OutOfDomain) as err:
            enforce_bounds(value, 0.0, 1.0, "x")
        assert "axis x" in str(err.value)
        assert "bounds=False" in str(err.value)
