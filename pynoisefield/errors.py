"""
Exception types raised by pynoisefield.

All of them signal caller bugs (broken preconditions) rather than transient
conditions: nothing in the package retries or recovers from them.
"""


class NoiseFieldError(Exception):
    """Base class for every pynoisefield error."""


class RangeError(NoiseFieldError, ValueError):
    """A sampler query point lies outside ``[0, xsize) x [0, ysize)``."""


class DimensionMismatch(NoiseFieldError, ValueError):
    """Two grids with different ``xsize`` or ``ysize`` were combined."""


class IndexOutOfRange(NoiseFieldError, IndexError):
    """A grid cell or lattice corner outside the allocated buffer was addressed."""


class DegenerateGradientError(NoiseFieldError, ValueError):
    """A gradient vector of zero length cannot be normalised."""


__all__ = [
    "NoiseFieldError",
    "RangeError",
    "DimensionMismatch",
    "IndexOutOfRange",
    "DegenerateGradientError",
]
