"""
Unit tests for the shared interpolation helpers.
"""
import numpy as np
import pytest

from pynoisefield.general_algorithms import fade, lerp


class TestLerp:
    """Test linear interpolation."""

    @pytest.mark.unit
    def test_endpoints(self):
        assert lerp(2.0, 5.0, 0.0) == 2.0
        assert lerp(2.0, 5.0, 1.0) == 5.0

    @pytest.mark.unit
    def test_midpoint(self):
        assert lerp(-1.0, 3.0, 0.5) == pytest.approx(1.0)

    @pytest.mark.unit
    def test_arrays(self):
        result = lerp(np.zeros(3), np.full(3, 4.0), np.array([0.0, 0.25, 1.0]))
        np.testing.assert_allclose(result, [0.0, 1.0, 4.0])


class TestFade:
    """Test the quintic fade curve."""

    @pytest.mark.unit
    def test_fixed_points(self):
        assert fade(0.0) == 0.0
        assert fade(1.0) == pytest.approx(1.0)
        assert fade(0.5) == pytest.approx(0.5)

    @pytest.mark.unit
    def test_monotonic(self):
        t = np.linspace(0.0, 1.0, 101)
        assert np.all(np.diff(fade(t)) >= 0.0)
