"""
Scalar interpolation helpers.

Both functions work on Python floats and on numpy arrays alike, so the
scalar sampler and its vectorised counterpart share one implementation.
"""


def lerp(a0, a1, w):
    """Linear interpolation between a0 and a1 by weight w."""
    return (1.0 - w) * a0 + w * a1


def fade(t):
    """Perlin fade function: 6t^5 - 15t^4 + 10t^3"""
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)
