"""
Noise generation module for pynoisefield.

Provides single-layer 2D gradient noise and its materialization into dense
grids. All noise is seeded explicitly, so the same seed always reproduces the
same lattice and therefore the same field.

Components:
- GradientLattice: One random unit gradient vector per lattice corner
- GradientNoise: Continuous sampler interpolating the corner dot products
- ScalarFieldSource: Interface for pluggable samplers
- noise_field: Eager sampling of a source into a DenseGrid2D

Usage:
    import pynoisefield as nf

    # Sample the continuous field directly
    sampler = nf.noise.GradientNoise(64, 64, seed=42)
    value = sampler.get(12.5, 3.25)

    # Materialize a smooth elevation layer and average it with a second one
    a = nf.noise.noise_field(256, 256, scale=0.014, seed=1)
    b = nf.noise.noise_field(256, 256, scale=0.014, seed=2)
    elevation = nf.noise.average(a, b)
"""

from .gradient_lattice import GradientLattice, normalise, random_unit_vectors
from .gradient_noise import GradientNoise, ScalarFieldSource
from .noise_field import average, max_valid_scale, noise_field

__all__ = [
    "GradientLattice", "random_unit_vectors", "normalise",
    "GradientNoise", "ScalarFieldSource",
    "noise_field", "max_valid_scale", "average",
]
