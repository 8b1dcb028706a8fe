"""
General numerical helpers shared by the grid and noise modules.
"""

from .interpolation import fade, lerp

__all__ = ["lerp", "fade"]
