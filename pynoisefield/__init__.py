"""
pynoisefield: procedural gradient noise and dense 2D scalar grids.

Synthesizes smooth, deterministic 2D noise over an integer lattice and stores
and manipulates such fields through a generic dense grid container. It is the
numerical engine of a terrain generator; colour mapping, classification and
rendering are left to the caller, which only needs the grid dimensions and its
value buffer.

Subpackages:
- grid: DenseGrid2D container and elementwise operations
- noise: Gradient lattice, gradient noise sampler, field materialization
- general_algorithms: Shared interpolation helpers
- cli: Command line entry points
"""

from . import constants, errors, general_algorithms, grid, noise
from .errors import (
    DegenerateGradientError,
    DimensionMismatch,
    IndexOutOfRange,
    NoiseFieldError,
    RangeError,
)

__version__ = "0.0.1"

__all__ = [
    "constants",
    "errors",
    "general_algorithms",
    "grid",
    "noise",
    "NoiseFieldError",
    "RangeError",
    "DimensionMismatch",
    "IndexOutOfRange",
    "DegenerateGradientError",
]
