"""
Unit tests for GradientLattice construction and lookup.
"""
import numpy as np
import pytest

from pynoisefield import constants as cte
from pynoisefield.errors import DegenerateGradientError, IndexOutOfRange
from pynoisefield.noise import GradientLattice, normalise, random_unit_vectors


@pytest.mark.unit
@pytest.mark.parametrize("xsize, ysize", [(1, 1), (8, 8), (7, 3), (2, 9)])
def test_unit_magnitude(xsize, ysize):
    lattice = GradientLattice(xsize, ysize, seed=11)
    assert lattice.xpts.shape == ((xsize + 1) * (ysize + 1),)
    assert np.all(np.abs(lattice.norms() - 1.0) < cte.NORM_TOLERANCE)


@pytest.mark.unit
def test_layout():
    lattice = GradientLattice(7, 3, seed=0)
    assert lattice.stride == 4
    assert lattice.array_size == 32
    indices = {lattice.index_of(ix, iy) for ix in range(8) for iy in range(4)}
    assert indices == set(range(lattice.array_size))


@pytest.mark.unit
def test_seed_reproducible():
    a = GradientLattice(6, 4, seed=99)
    b = GradientLattice(6, 4, seed=99)
    c = GradientLattice(6, 4, seed=100)
    np.testing.assert_array_equal(a.xpts, b.xpts)
    np.testing.assert_array_equal(a.ypts, b.ypts)
    assert not np.array_equal(a.xpts, c.xpts)


@pytest.mark.unit
def test_injected_generator():
    a = GradientLattice(5, 5, rng=np.random.default_rng(3))
    b = GradientLattice(5, 5, seed=3)
    np.testing.assert_array_equal(a.xpts, b.xpts)


@pytest.mark.unit
def test_directions_cover_circle():
    """Rejection sampling yields directions in every quadrant."""
    gx, gy = random_unit_vectors(2000, np.random.default_rng(5))
    angles = np.arctan2(gy, gx)
    counts, _ = np.histogram(angles, bins=4, range=(-np.pi, np.pi))
    assert np.all(counts > 350)


@pytest.mark.unit
def test_get():
    lattice = GradientLattice(4, 2, seed=8)
    gx, gy = lattice.get(4, 2)
    idx = lattice.index_of(4, 2)
    assert gx == float(lattice.xpts[idx])
    assert gy == float(lattice.ypts[idx])
    assert gx * gx + gy * gy == pytest.approx(1.0, abs=cte.NORM_TOLERANCE)


@pytest.mark.unit
@pytest.mark.parametrize("ix, iy", [(5, 0), (0, 3), (-1, 0), (0, -1)])
def test_get_out_of_range(ix, iy):
    lattice = GradientLattice(4, 2, seed=8)
    with pytest.raises(IndexOutOfRange):
        lattice.get(ix, iy)


@pytest.mark.unit
def test_read_only():
    lattice = GradientLattice(3, 3, seed=1)
    with pytest.raises(ValueError):
        lattice.xpts[0] = 0.0


@pytest.mark.unit
@pytest.mark.parametrize("xsize, ysize", [(0, 3), (3, -2)])
def test_invalid_dimensions(xsize, ysize):
    with pytest.raises(ValueError):
        GradientLattice(xsize, ysize, seed=0)


class TestFromComponents:
    """Test lattices built from explicit vectors."""

    @pytest.mark.unit
    def test_normalises(self):
        lattice = GradientLattice.from_components(2, 1, np.full((3, 2), 3.0), np.full((3, 2), 4.0))
        gx, gy = lattice.get(1, 1)
        assert gx == pytest.approx(0.6)
        assert gy == pytest.approx(0.8)

    @pytest.mark.unit
    def test_corner_layout(self):
        """Component arrays are indexed [ix, iy]."""
        gx = np.array([[1.0, 0.0], [-1.0, 0.0]])
        gy = np.array([[0.0, 1.0], [0.0, -1.0]])
        lattice = GradientLattice.from_components(1, 1, gx, gy)
        assert lattice.get(0, 0) == (1.0, 0.0)
        assert lattice.get(0, 1) == (0.0, 1.0)
        assert lattice.get(1, 0) == (-1.0, 0.0)
        assert lattice.get(1, 1) == (0.0, -1.0)

    @pytest.mark.unit
    def test_zero_vector(self):
        gx = np.ones(4)
        gy = np.zeros(4)
        gx[2] = 0.0
        with pytest.raises(DegenerateGradientError):
            GradientLattice.from_components(1, 1, gx, gy)

    @pytest.mark.unit
    def test_wrong_size(self):
        with pytest.raises(ValueError):
            GradientLattice.from_components(2, 2, np.ones(4), np.ones(4))


@pytest.mark.unit
def test_normalise_rejects_zero():
    with pytest.raises(DegenerateGradientError):
        normalise(np.array([1.0, 0.0]), np.array([0.0, 0.0]))
