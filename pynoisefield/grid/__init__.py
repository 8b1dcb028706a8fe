"""
Grid module for pynoisefield.

Provides DenseGrid2D, the generic dense scalar field that every noise field
is materialized into and that derived fields are built from through its
elementwise operations (combine, update).
"""

from .dense_grid import DenseGrid2D

__all__ = ["DenseGrid2D"]
