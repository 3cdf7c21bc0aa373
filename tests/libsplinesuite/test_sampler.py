"""Tests for sampler — evenly spaced tabulation of functions."""
import numpy as np
import pytest

from splinesuite.libsplinesuite.errors import InvalidDomain
from splinesuite.libsplinesuite.sampler import sample_1D, sample_2D


class TestSample1D:
    def test_values(self):
        x, y = sample_1D(lambda t: 2.0 * t + 1.0, -1.0, 1.0, 5)
        np.testing.assert_allclose(x, [-1.0, -0.5, 0.0, 0.5, 1.0])
        np.testing.assert_allclose(y, 2.0 * x + 1.0)
        assert x.dtype == np.float64 and y.dtype == np.float64

    def test_numpy_integer_count(self):
        x, _ = sample_1D(np.cos, 0.0, 1.0, np.int32(4))
        assert x.size == 4

    @pytest.mark.parametrize("n", [0, 2, -3, 3.5, "7", False])
    def test_bad_count(self, n):
        with pytest.raises(InvalidDomain):
            sample_1D(np.cos, 0.0, 1.0, n)

    @pytest.mark.parametrize("xa, xb", [(1.0, 1.0), (2.0, 1.0), (0.0, np.inf)])
    def test_bad_range(self, xa, xb):
        with pytest.raises(InvalidDomain):
            sample_1D(np.cos, xa, xb, 10)

    def test_fails_before_calling_function(self):
        def f(t):
            raise AssertionError("must not be called")

        with pytest.raises(InvalidDomain):
            sample_1D(f, 1.0, 0.0, 10)


class TestSample2D:
    def test_layout(self):
        x, y, Z = sample_2D(lambda a, b: 10.0 * a + b, 0.0, 2.0, 3, 0.0, 3.0, 4)
        assert x.shape == (3,) and y.shape == (4,) and Z.shape == (3, 4)
        for i in range(3):
            for j in range(4):
                assert Z[i, j] == 10.0 * x[i] + y[j]

    def test_bad_counts(self):
        with pytest.raises(InvalidDomain):
            sample_2D(lambda a, b: a, 0.0, 1.0, 3, 0.0, 1.0, 1)
        with pytest.raises(InvalidDomain):
            sample_2D(lambda a, b: a, 0.0, 1.0, 3, 1.0, 0.0, 3)
