"""
Noise field materialization for pynoisefield.

Turns a continuous ScalarFieldSource into a fully precomputed DenseGrid2D:
cell (i, j) receives the source value at (i * scale, j * scale). The result is
a plain grid; nothing noise-specific is attached to it.
"""

import logging
import math

import numpy as np

from .. import constants as cte
from ..grid import DenseGrid2D
from .gradient_noise import GradientNoise, ScalarFieldSource

logger = logging.getLogger(__name__)


def max_valid_scale(xsize: int, ysize: int) -> float:
    """
    Exclusive upper bound on ``scale`` for a domain equal to the grid size.

    The last sample point along an axis of n cells is (n - 1) * scale, which
    must stay below n. An axis of a single cell only samples 0 and puts no
    bound on scale.
    """
    bounds = [n / (n - 1) if n > 1 else math.inf for n in (xsize, ysize)]
    return min(bounds)


def noise_field(
    xsize: int,
    ysize: int,
    scale: float,
    seed=None,
    source: ScalarFieldSource = None,
    output_scale: float = cte.OUTPUT_SCALE,
    interpolation: str = "linear",
    backend: str = "numpy",
) -> DenseGrid2D:
    """
    Materialize a scalar field into a dense grid.

    Args:
        xsize: Number of grid cells along i, also the sampler domain width
        ysize: Number of grid cells along j, also the sampler domain height
        scale: Spacing between sample points (smaller = smoother field).
              Every (i * scale, j * scale) must fall inside the source's
              domain, see max_valid_scale
        seed: Seed of the internal GradientNoise lattice (default: random)
        source: ScalarFieldSource to sample instead of a new GradientNoise
        output_scale: Output multiplier of the internal GradientNoise
        interpolation: Interpolation mode of the internal GradientNoise
        backend: "numpy" (vectorised) or "taichi" (parallel kernel; needs
                ti.init and a GradientNoise source)

    Returns:
        DenseGrid2D: Fully populated grid of shape (ysize, xsize)

    Raises:
        RangeError: If a sample point falls outside the source's domain
        ValueError: On an unknown backend or a source the backend cannot run

    Example:
        elevation = noise_field(256, 256, 0.014, seed=1)
        elevation.get(10, 20)
    """
    if backend not in cte.BACKENDS:
        raise ValueError(f"backend must be one of {cte.BACKENDS}, got '{backend}'")

    if source is None:
        source = GradientNoise(
            xsize, ysize, seed=seed,
            output_scale=output_scale, interpolation=interpolation,
        )

    grid = DenseGrid2D(xsize, ysize)
    i, j = grid.coords_of(np.arange(grid.size))
    xs = i * scale
    ys = j * scale

    if backend == "taichi":
        if not isinstance(source, GradientNoise):
            raise ValueError("The taichi backend only supports GradientNoise sources")
        from . import taichi_backend

        source.check_points(xs, ys)
        grid.values[:] = taichi_backend.materialize(source, xsize, ysize, scale)
    else:
        grid.values[:] = source.sample_array(xs, ys)

    logger.debug(
        "Materialized %dx%d noise field (scale=%g, backend=%s)",
        xsize, ysize, scale, backend,
    )
    return grid


def average(a: DenseGrid2D, b: DenseGrid2D) -> DenseGrid2D:
    """Cell-wise mean of two equally sized grids, e.g. two noise layers."""
    return a.combine(lambda u, v: (u + v) / 2.0, b, vectorized=True)
