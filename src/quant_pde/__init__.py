"""
quant_pde

Coordinate layer of a finite-difference PDE engine for derivative pricing.

The package exposes the axis type and its configuration at the top level, so
you can write, for example:

    from quant_pde import Axis

    ax = Axis([0.0, 10.0, 20.0]).refine(2)
"""

from .config import DEFAULT_AXIS_CONFIG, AxisConfig
from .exceptions import (
    AxisInvariantError,
    AxisRefinementError,
    EmptyAxisError,
    NonFiniteAxisError,
    NonMonotonicAxisError,
)
from .numerics.axis import Axis

__all__ = [
    # Axis
    "Axis",
    # Config
    "AxisConfig",
    "DEFAULT_AXIS_CONFIG",
    # Errors
    "AxisInvariantError",
    "EmptyAxisError",
    "NonMonotonicAxisError",
    "NonFiniteAxisError",
    "AxisRefinementError",
]
