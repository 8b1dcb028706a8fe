"""
Random gradient lattice for gradient noise.

Stores one unit-length 2D vector per corner of a (xsize+1) x (ysize+1)
lattice as two parallel float32 buffers (x and y components). Corner (ix, iy)
lives at ``ix * stride + iy`` with ``stride = ysize + 1``.
"""

import logging

import numpy as np

from .. import constants as cte
from ..errors import DegenerateGradientError, IndexOutOfRange

logger = logging.getLogger(__name__)


def random_unit_vectors(n: int, rng: np.random.Generator) -> tuple[np.ndarray, np.ndarray]:
    """
    Draw n directions uniformly on the unit circle.

    Points are rejection sampled inside the unit disk, excluding the origin,
    then normalised, so every direction is equally likely.

    Args:
        n: Number of vectors
        rng: numpy random Generator

    Returns:
        tuple: (gx, gy) float64 arrays of length n
    """
    gx = np.empty(n, dtype=np.float64)
    gy = np.empty(n, dtype=np.float64)
    filled = 0
    while filled < n:
        missing = n - filled
        candidates = rng.uniform(-1.0, 1.0, size=(missing, 2))
        mag = np.hypot(candidates[:, 0], candidates[:, 1])
        keep = (mag > 0.0) & (mag <= 1.0)
        accepted = candidates[keep]
        count = accepted.shape[0]
        gx[filled:filled + count] = accepted[:, 0]
        gy[filled:filled + count] = accepted[:, 1]
        filled += count
    return normalise(gx, gy)


def normalise(gx: np.ndarray, gy: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """
    Scale every (gx, gy) pair to unit length.

    Raises:
        DegenerateGradientError: If any vector has zero length
    """
    mag = np.hypot(gx, gy)
    if np.any(mag == 0.0):
        bad = int(np.flatnonzero(mag == 0.0)[0])
        raise DegenerateGradientError(f"gradient vector {bad} has zero length")
    return gx / mag, gy / mag


class GradientLattice:
    """
    2D random gradient grid, immutable after construction.

    Args:
        xsize: Number of noise cells along x (lattice has xsize+1 corners)
        ysize: Number of noise cells along y (lattice has ysize+1 corners)
        seed: Seed for numpy's default_rng; same seed, same lattice
        rng: Injected numpy Generator, takes precedence over seed

    Example:
        lattice = GradientLattice(16, 16, seed=7)
        gx, gy = lattice.get(3, 4)
    """

    def __init__(self, xsize: int, ysize: int, seed=None, rng=None):
        self._setup(xsize, ysize)
        if rng is None:
            rng = np.random.default_rng(seed)

        gx, gy = random_unit_vectors(self.array_size, rng)
        self._store(gx, gy)
        logger.debug(
            "Built %dx%d gradient lattice (%d corners)",
            self.xsize, self.ysize, self.array_size,
        )

    @classmethod
    def from_components(cls, xsize: int, ysize: int, gx, gy) -> "GradientLattice":
        """
        Build a lattice from explicit gradient components.

        Args:
            xsize, ysize: Lattice cell counts
            gx, gy: Array-likes of shape (xsize+1, ysize+1) or flat arrays of
                   that many elements in storage order; vectors need not be
                   unit length

        Raises:
            ValueError: If the component arrays have the wrong size
            DegenerateGradientError: If a vector has zero length
        """
        lattice = cls.__new__(cls)
        lattice._setup(xsize, ysize)
        gx = np.asarray(gx, dtype=np.float64).reshape(-1)
        gy = np.asarray(gy, dtype=np.float64).reshape(-1)
        if gx.size != lattice.array_size or gy.size != lattice.array_size:
            raise ValueError(
                f"Expected {lattice.array_size} gradient components, "
                f"got {gx.size} and {gy.size}"
            )
        lattice._store(*normalise(gx, gy))
        return lattice

    def _setup(self, xsize: int, ysize: int) -> None:
        if int(xsize) != xsize or int(ysize) != ysize:
            raise ValueError("xsize and ysize must be integers")
        if xsize <= 0 or ysize <= 0:
            raise ValueError(f"Lattice dimensions must be > 0, got ({xsize}, {ysize})")
        self.xsize = int(xsize)
        self.ysize = int(ysize)
        self.stride = self.ysize + 1
        self.array_size = self.stride * (self.xsize + 1)

    def _store(self, gx: np.ndarray, gy: np.ndarray) -> None:
        self.xpts = gx.astype(cte.FLOAT_TYPE_NP)
        self.ypts = gy.astype(cte.FLOAT_TYPE_NP)
        self.xpts.flags.writeable = False
        self.ypts.flags.writeable = False

    def index_of(self, ix: int, iy: int) -> int:
        return ix * self.stride + iy

    def get(self, ix: int, iy: int) -> tuple[float, float]:
        """Gradient vector stored at integer corner (ix, iy)."""
        if not (0 <= ix <= self.xsize and 0 <= iy <= self.ysize):
            raise IndexOutOfRange(
                f"corner ({ix}, {iy}) outside lattice [0, {self.xsize}] x [0, {self.ysize}]"
            )
        idx = self.index_of(ix, iy)
        return float(self.xpts[idx]), float(self.ypts[idx])

    def norms(self) -> np.ndarray:
        """Magnitude of every stored vector, in storage order."""
        return np.hypot(self.xpts.astype(np.float64), self.ypts.astype(np.float64))
