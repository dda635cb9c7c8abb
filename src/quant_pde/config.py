from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AxisConfig:
    """Build-mode gated checks for :class:`~quant_pde.numerics.axis.Axis`.

    ``check_monotone`` defaults to ``__debug__``: on in ordinary (and test)
    runs, off under ``python -O``. Optimized runs trust literal grid
    definitions and pass a broken axis downstream unchecked.

    ``check_bounds`` adds an explicit ``0 <= i < n`` test to indexed access
    (negative indices included). It is opt-in and costs one comparison per
    access.
    """

    check_monotone: bool = __debug__
    check_bounds: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.check_monotone, bool):
            raise TypeError("check_monotone must be a bool")
        if not isinstance(self.check_bounds, bool):
            raise TypeError("check_bounds must be a bool")


DEFAULT_AXIS_CONFIG: AxisConfig = AxisConfig()
