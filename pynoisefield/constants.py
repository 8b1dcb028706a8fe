"""
Default constants for pynoisefield.

Module-level values read as ``cte.NAME`` throughout the package. Functions
take them as keyword defaults, so a caller overrides a value per call rather
than by editing this module.
"""

import numpy as np

# Storage type of every dense buffer (grid cells and lattice gradients)
FLOAT_TYPE_NP = np.float32

# Empirical stretch applied to interpolated gradient noise to widen its
# naturally narrow range toward [-1, 1]
OUTPUT_SCALE = 2.2

# Seeding
DEFAULT_SEED = 42

# Terrain generator defaults (elevation layer)
DEFAULT_XSIZE = 256
DEFAULT_YSIZE = 256
DEFAULT_SCALE = 0.014

# Allowed deviation of a gradient vector's magnitude from 1
NORM_TOLERANCE = 1e-5

INTERPOLATION_MODES = ("linear", "quintic")
BACKENDS = ("numpy", "taichi")
