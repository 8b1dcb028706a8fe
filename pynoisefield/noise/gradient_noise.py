"""
Gradient noise sampling for pynoisefield.

GradientNoise turns a GradientLattice into a continuous, deterministic scalar
field over [0, xsize) x [0, ysize): a query point is located in its lattice
cell, the four corner gradients are dotted with the offsets from each corner
to the point, and the four dot products are blended bilinearly.

By default the fractional offsets are used directly as interpolation weights
(no fade curve). The field is continuous but shows axis-aligned creases along
cell edges; ``interpolation="quintic"`` applies the classic Perlin fade
instead.
"""

import math
from abc import ABC, abstractmethod

import numpy as np

from .. import constants as cte
from ..errors import RangeError
from ..general_algorithms import fade, lerp
from .gradient_lattice import GradientLattice


class ScalarFieldSource(ABC):
    """
    Anything that yields a scalar for a point of the plane.

    The materializer depends only on this interface, so alternative noise
    generators can be plugged in next to GradientNoise.
    """

    @abstractmethod
    def sample(self, x: float, y: float) -> float:
        """Value of the field at (x, y)."""

    def sample_array(self, xs, ys) -> np.ndarray:
        """
        Sample many points at once.

        Default implementation calls ``sample`` per point; subclasses override
        it with a vectorised version.
        """
        xs, ys = np.broadcast_arrays(np.asarray(xs, dtype=np.float64),
                                     np.asarray(ys, dtype=np.float64))
        out = np.empty(xs.shape, dtype=np.float64)
        for k, (x, y) in enumerate(zip(xs.ravel(), ys.ravel())):
            out.flat[k] = self.sample(float(x), float(y))
        return out


class GradientNoise(ScalarFieldSource):
    """
    Single-layer 2D gradient noise over a bounded domain.

    Args:
        xsize: Domain width; queries need 0 <= x < xsize
        ysize: Domain height; queries need 0 <= y < ysize
        seed: Seed of the owned GradientLattice
        rng: Injected numpy Generator for the lattice (overrides seed)
        output_scale: Multiplier applied to the interpolated value
                      (default: cte.OUTPUT_SCALE = 2.2)
        interpolation: "linear" (raw weights) or "quintic" (Perlin fade)
        lattice: Prebuilt GradientLattice of size (xsize, ysize)

    Example:
        noise = GradientNoise(64, 64, seed=3)
        noise.get(10.25, 31.5)
    """

    def __init__(
        self,
        xsize: int,
        ysize: int,
        seed=None,
        rng=None,
        output_scale: float = cte.OUTPUT_SCALE,
        interpolation: str = "linear",
        lattice: GradientLattice = None,
    ):
        if interpolation not in cte.INTERPOLATION_MODES:
            raise ValueError(
                f"interpolation must be one of {cte.INTERPOLATION_MODES}, got '{interpolation}'"
            )

        if lattice is None:
            lattice = GradientLattice(xsize, ysize, seed=seed, rng=rng)
        elif (lattice.xsize, lattice.ysize) != (xsize, ysize):
            raise ValueError(
                f"Lattice size ({lattice.xsize}, {lattice.ysize}) does not match "
                f"domain ({xsize}, {ysize})"
            )

        self.xsize = lattice.xsize
        self.ysize = lattice.ysize
        self.gradient = lattice
        self.output_scale = output_scale
        self.interpolation = interpolation

    def _check_point(self, x: float, y: float) -> None:
        if not 0 <= x < self.xsize:
            raise RangeError(f"x={x} outside [0, {self.xsize})")
        if not 0 <= y < self.ysize:
            raise RangeError(f"y={y} outside [0, {self.ysize})")

    def check_points(self, xs: np.ndarray, ys: np.ndarray) -> None:
        """Raise RangeError if any of the given points lies outside the domain."""
        bad_x = ~((xs >= 0) & (xs < self.xsize))
        if np.any(bad_x):
            raise RangeError(f"x={xs[bad_x].flat[0]} outside [0, {self.xsize})")
        bad_y = ~((ys >= 0) & (ys < self.ysize))
        if np.any(bad_y):
            raise RangeError(f"y={ys[bad_y].flat[0]} outside [0, {self.ysize})")

    def dot_grid_gradient(self, ix: int, iy: int, x: float, y: float) -> float:
        """Dot product of the corner gradient with the offset from (ix, iy) to (x, y)."""
        gx, gy = self.gradient.get(ix, iy)
        return (x - ix) * gx + (y - iy) * gy

    def get(self, x: float, y: float) -> float:
        """
        Noise value at (x, y).

        Raises:
            RangeError: If (x, y) lies outside [0, xsize) x [0, ysize)
        """
        self._check_point(x, y)

        # Grid points of input point
        ix0 = math.floor(x)
        iy0 = math.floor(y)
        ix1 = ix0 + 1
        iy1 = iy0 + 1

        # Interpolation weights
        sx = x - ix0
        sy = y - iy0
        if self.interpolation == "quintic":
            sx = fade(sx)
            sy = fade(sy)

        n0 = self.dot_grid_gradient(ix0, iy0, x, y)
        n1 = self.dot_grid_gradient(ix1, iy0, x, y)
        g0 = lerp(n0, n1, sx)

        n2 = self.dot_grid_gradient(ix0, iy1, x, y)
        n3 = self.dot_grid_gradient(ix1, iy1, x, y)
        g1 = lerp(n2, n3, sx)

        return lerp(g0, g1, sy) * self.output_scale

    def sample(self, x: float, y: float) -> float:
        return self.get(x, y)

    def sample_array(self, xs, ys) -> np.ndarray:
        """
        Vectorised ``get`` over broadcastable coordinate arrays.

        Every point is range checked before anything is computed.

        Returns:
            numpy.ndarray: float64 values with the broadcast shape of xs, ys
        """
        xs, ys = np.broadcast_arrays(np.asarray(xs, dtype=np.float64),
                                     np.asarray(ys, dtype=np.float64))
        self.check_points(xs, ys)

        ix0 = np.floor(xs).astype(np.int64)
        iy0 = np.floor(ys).astype(np.int64)
        ix1 = ix0 + 1
        iy1 = iy0 + 1

        sx = xs - ix0
        sy = ys - iy0
        if self.interpolation == "quintic":
            sx = fade(sx)
            sy = fade(sy)

        gxs = self.gradient.xpts.astype(np.float64)
        gys = self.gradient.ypts.astype(np.float64)
        stride = self.gradient.stride

        def dot(ix, iy):
            idx = ix * stride + iy
            return (xs - ix) * gxs[idx] + (ys - iy) * gys[idx]

        g0 = lerp(dot(ix0, iy0), dot(ix1, iy0), sx)
        g1 = lerp(dot(ix0, iy1), dot(ix1, iy1), sx)
        return lerp(g0, g1, sy) * self.output_scale
