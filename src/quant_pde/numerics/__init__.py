# src/quant_pde/numerics/__init__.py
"""
Numerical building blocks.

The axis is the coordinate primitive that grid, interpolation and stencil
code is built on.
"""

from .axis import Axis
from .validate import assert_min_points, assert_strictly_increasing, check_index

__all__ = [
    # Axis
    "Axis",
    # Validation
    "assert_min_points",
    "assert_strictly_increasing",
    "check_index",
]
