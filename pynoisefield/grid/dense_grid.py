"""
Dense 2D grid container for pynoisefield.

DenseGrid2D maps integer coordinates (i, j) to a floating-point value stored
in one contiguous numpy buffer of size xsize * ysize. Cells are laid out
row-major with i varying fastest, so ``to_numpy()`` exposes the buffer as a
(ysize, xsize) array without copying.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from .. import constants as cte
from ..errors import DimensionMismatch, IndexOutOfRange


class DenseGrid2D:
    """
    Generic dense scalar field over an integer lattice.

    Args:
        xsize: Number of cells along i (columns)
        ysize: Number of cells along j (rows)
        dtype: numpy dtype of the buffer (default: cte.FLOAT_TYPE_NP)

    Example:
        grid = DenseGrid2D(3, 5)
        grid.set(2, 4, 1.5)
        grid.get_by_index(grid.idx_of(2, 4))  # 1.5
    """

    def __init__(self, xsize: int, ysize: int, dtype=cte.FLOAT_TYPE_NP):
        if int(xsize) != xsize or int(ysize) != ysize:
            raise ValueError("xsize and ysize must be integers")
        if xsize <= 0 or ysize <= 0:
            raise ValueError(f"Grid dimensions must be > 0, got ({xsize}, {ysize})")

        self._xsize = int(xsize)
        self._ysize = int(ysize)
        self._size = self._xsize * self._ysize
        self._values = np.zeros(self._size, dtype=dtype)

    @classmethod
    def from_numpy(cls, array: np.ndarray, dtype=cte.FLOAT_TYPE_NP) -> "DenseGrid2D":
        """
        Build a grid from a 2D array of shape (ysize, xsize).

        The data is copied; later changes to ``array`` do not reach the grid.
        """
        array = np.asarray(array)
        if array.ndim != 2:
            raise ValueError("Input numpy array must be 2D")
        ysize, xsize = array.shape
        grid = cls(xsize, ysize, dtype=dtype)
        grid._values[:] = array.reshape(-1)
        return grid

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    @property
    def xsize(self) -> int:
        return self._xsize

    @property
    def ysize(self) -> int:
        return self._ysize

    @property
    def size(self) -> int:
        return self._size

    @property
    def shape(self) -> tuple[int, int]:
        """Shape of the numpy view, (ysize, xsize)."""
        return (self._ysize, self._xsize)

    @property
    def values(self) -> np.ndarray:
        """The flat cell buffer itself (not a copy)."""
        return self._values

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(xsize={self._xsize}, ysize={self._ysize}, "
            f"dtype={self._values.dtype})"
        )

    # ------------------------------------------------------------------
    # Index arithmetic
    # ------------------------------------------------------------------
    def idx_of(self, i: int, j: int) -> int:
        """Linear index of cell (i, j): i + xsize * j."""
        return i + self._xsize * j

    def coords_of(self, idx: int) -> tuple[int, int]:
        """Coordinates (i, j) of linear index idx; inverse of idx_of."""
        return (idx % self._xsize, idx // self._xsize)

    def _check_coords(self, i: int, j: int) -> None:
        if not (0 <= i < self._xsize and 0 <= j < self._ysize):
            raise IndexOutOfRange(
                f"cell ({i}, {j}) outside grid of size ({self._xsize}, {self._ysize})"
            )

    def _check_index(self, idx: int) -> None:
        if not 0 <= idx < self._size:
            raise IndexOutOfRange(f"index {idx} outside [0, {self._size})")

    # ------------------------------------------------------------------
    # Value access
    # ------------------------------------------------------------------
    def get(self, i: int, j: int) -> float:
        self._check_coords(i, j)
        return float(self._values[self.idx_of(i, j)])

    def set(self, i: int, j: int, v: float) -> None:
        self._check_coords(i, j)
        self._values[self.idx_of(i, j)] = v

    def get_by_index(self, idx: int) -> float:
        """Direct buffer read for loops that already walk linear indices."""
        self._check_index(idx)
        return float(self._values[idx])

    def set_by_index(self, idx: int, v: float) -> None:
        self._check_index(idx)
        self._values[idx] = v

    def fill(self, v: float) -> "DenseGrid2D":
        self._values.fill(v)
        return self

    def copy(self) -> "DenseGrid2D":
        result = type(self)(self._xsize, self._ysize, dtype=self._values.dtype)
        result._values[:] = self._values
        return result

    def to_numpy(self) -> np.ndarray:
        """(ysize, xsize) view sharing memory with the grid."""
        return self._values.reshape(self._ysize, self._xsize)

    # ------------------------------------------------------------------
    # Elementwise operations
    # ------------------------------------------------------------------
    def combine(
        self,
        fn: Callable[[float, float], float],
        other: "DenseGrid2D",
        vectorized: bool = False,
    ) -> "DenseGrid2D":
        """
        Combine two grids cell by cell into a new grid.

        Args:
            fn: Binary function applied as fn(self[idx], other[idx])
            other: Grid with the same xsize and ysize
            vectorized: If True, fn is called once on the two whole buffers
                       and must return an array of the same length

        Returns:
            DenseGrid2D: New grid; neither input is modified

        Raises:
            DimensionMismatch: If the grid sizes differ
        """
        if self._xsize != other.xsize:
            raise DimensionMismatch(
                f"X-sizes of grids must match, got {self._xsize} and {other.xsize}"
            )
        if self._ysize != other.ysize:
            raise DimensionMismatch(
                f"Y-sizes of grids must match, got {self._ysize} and {other.ysize}"
            )

        result = type(self)(self._xsize, self._ysize, dtype=self._values.dtype)
        if vectorized:
            result._values[:] = fn(self._values, other.values)
        else:
            ufunc = np.frompyfunc(fn, 2, 1)
            result._values[:] = ufunc(self._values, other.values)
        return result

    def update(self, fn: Callable[[float], float], vectorized: bool = False) -> "DenseGrid2D":
        """
        Replace every cell with fn(cell), in place.

        The buffer object is kept; only its contents change.
        """
        if vectorized:
            self._values[:] = fn(self._values)
        else:
            ufunc = np.frompyfunc(fn, 1, 1)
            self._values[:] = ufunc(self._values)
        return self
