# src/quant_pde/numerics/axis.py
"""Ordered tick sequences partitioning one spatial dimension.

An :class:`Axis` holds ticks ``x_1 < x_2 < ... < x_n`` in a private float64
buffer. Grid, interpolation and stencil code read the ticks many times and
rely on two invariants:

- strict monotonicity: ``x[i] < x[i+1]`` for every adjacent pair
- non-empty: ``n >= 1``

Validation of the explicit-list constructor is gated by
:attr:`AxisConfig.check_monotone` (``__debug__`` by default). Under
``python -O`` nothing is checked and a broken axis flows downstream
unnoticed; this is the performance trade-off of a hot numerical primitive.

The length of an axis never changes after construction. Only element-wise
writes through ``axis[i] = v`` mutate it.
"""

from __future__ import annotations

import warnings
from typing import Any

import numpy as np

from ..config import DEFAULT_AXIS_CONFIG, AxisConfig
from ..exceptions import AxisRefinementError
from ..typing import FloatArray, FloatDType, TickSource
from .validate import assert_min_points, assert_strictly_increasing, check_index

__all__ = ["Axis"]

# Relative slack (in units of `step`) when deciding whether `end` sits on the
# lattice start + k*step.
_RANGE_RTOL = 1e-9


class Axis:
    """A strictly increasing, fixed-length set of ticks.

    Parameters
    ----------
    ticks : iterable of float
        The ticks, in order. They should be strictly increasing.
    cfg : AxisConfig, optional
        Validation flags. Defaults to :data:`DEFAULT_AXIS_CONFIG`.

    Raises
    ------
    EmptyAxisError
        If ``ticks`` is empty (only when ``cfg.check_monotone``).
    NonMonotonicAxisError
        If two adjacent ticks are not strictly increasing (only when
        ``cfg.check_monotone``).

    Examples
    --------
    >>> ax = Axis([0.0, 10.0, 20.0])
    >>> print(ax.refine())
    (0 5 10 15 20)
    """

    __slots__ = ("_ticks", "_cfg")

    def __init__(self, ticks: TickSource, *, cfg: AxisConfig | None = None) -> None:
        cfg = DEFAULT_AXIS_CONFIG if cfg is None else cfg

        if isinstance(ticks, np.ndarray):
            arr = np.array(ticks, dtype=FloatDType)
        else:
            arr = np.fromiter(ticks, dtype=FloatDType)

        if cfg.check_monotone:
            assert_min_points(arr, 1, "ticks")
            assert_strictly_increasing(arr, "ticks")

        self._ticks: FloatArray = arr
        self._cfg = cfg

    # --- alternative constructors -----------------------------------------

    @classmethod
    def _allocate(cls, length: int, cfg: AxisConfig) -> Axis:
        """Axis with an uninitialized buffer; the caller must fill every slot."""
        axis = cls.__new__(cls)
        axis._ticks = np.empty(int(length), dtype=FloatDType)
        axis._cfg = cfg
        return axis

    @classmethod
    def from_vector(cls, vector: Any, *, cfg: AxisConfig | None = None) -> Axis:
        """Bulk-copy a numeric vector into a new axis.

        The vector is assumed to be validated by whoever produced it; no
        monotonicity check is made regardless of ``cfg``.
        """
        vec = np.asarray(vector, dtype=FloatDType)
        if vec.ndim != 1:
            raise ValueError(f"vector must be 1D, got shape {vec.shape}")
        axis = cls._allocate(vec.shape[0], DEFAULT_AXIS_CONFIG if cfg is None else cfg)
        axis._ticks[:] = vec
        return axis

    @classmethod
    def range(
        cls,
        start: float,
        step: float,
        end: float,
        *,
        cfg: AxisConfig | None = None,
    ) -> Axis:
        """Ticks ``start, start + step, ...`` not exceeding ``end``.

        If ``end`` lies on the lattice (up to rounding) the last tick is
        exactly ``end``. With ``cfg.check_monotone`` on, a step too small to
        separate ticks in float64 raises :class:`NonMonotonicAxisError`.
        """
        start = float(start)
        step = float(step)
        end = float(end)
        if not (step > 0.0):
            raise ValueError("step must be > 0")
        if not (end > start):
            raise ValueError("Need start < end")

        m = (end - start) / step
        k = int(np.floor(m + _RANGE_RTOL))

        axis = cls._allocate(k + 1, DEFAULT_AXIS_CONFIG if cfg is None else cfg)
        axis._ticks[:] = start + step * np.arange(k + 1, dtype=FloatDType)
        if abs(m - k) <= _RANGE_RTOL:
            axis._ticks[-1] = end
        if axis._cfg.check_monotone:
            assert_strictly_increasing(axis._ticks, "ticks")
        return axis

    @classmethod
    def uniform(
        cls,
        lower: float,
        upper: float,
        n: int,
        *,
        cfg: AxisConfig | None = None,
    ) -> Axis:
        """``n`` evenly spaced ticks from ``lower`` to ``upper`` inclusive."""
        if int(n) < 2:
            raise ValueError("n must be >= 2")
        if not (float(lower) < float(upper)):
            raise ValueError("Need lower < upper")

        axis = cls._allocate(int(n), DEFAULT_AXIS_CONFIG if cfg is None else cfg)
        axis._ticks[:] = np.linspace(float(lower), float(upper), int(n), dtype=FloatDType)
        if axis._cfg.check_monotone:
            assert_strictly_increasing(axis._ticks, "ticks")
        return axis

    # --- refinement ---------------------------------------------------------

    def _refine_once(self) -> Axis:
        x = self._ticks
        n = int(x.shape[0])
        if n < 2:
            raise AxisRefinementError(
                f"Cannot refine an axis with {n} tick(s); need at least 2"
            )

        refined = Axis._allocate(2 * n - 1, self._cfg)
        y = refined._ticks
        # originals are copied, never recomputed
        y[0::2] = x
        y[1::2] = (x[:-1] + x[1:]) / 2.0
        return refined

    def refine(self, levels: int = 1) -> Axis:
        """Return a new axis with a tick placed midway between each pair.

        Applied ``levels`` times this gives ``2**levels * (n - 1) + 1`` ticks.
        Every existing tick keeps its exact value, at position
        ``2**levels * i``.

        Raises
        ------
        AxisRefinementError
            If the axis has fewer than two ticks.
        """
        levels = int(levels)
        if levels < 0:
            raise ValueError("levels must be >= 0")
        if levels == 0:
            return self.copy()

        out = self
        for _ in range(levels):
            out = out._refine_once()

            if self._cfg.check_monotone and np.any(np.diff(out._ticks) <= 0.0):
                warnings.warn(
                    "Refinement produced a midpoint equal to one of its neighbours; "
                    "adjacent ticks are too close to be split in float64.",
                    category=RuntimeWarning,
                    stacklevel=2,
                )
        return out

    # --- access -------------------------------------------------------------

    def __getitem__(self, i: int) -> float:
        if self._cfg.check_bounds:
            i = check_index(i, self._ticks.shape[0])
        return float(self._ticks[i])

    def __setitem__(self, i: int, value: float) -> None:
        if self._cfg.check_bounds:
            i = check_index(i, self._ticks.shape[0])
        self._ticks[i] = value

    def __len__(self) -> int:
        return int(self._ticks.shape[0])

    def __iter__(self):
        return iter(self._ticks.tolist())

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        arr = self.ticks()
        if dtype is not None and np.dtype(dtype) != arr.dtype:
            if copy is False:
                raise ValueError(
                    f"Cannot convert axis ticks to {np.dtype(dtype)} without a copy"
                )
            return arr.astype(dtype)
        return arr.copy() if copy else arr

    def size(self) -> int:
        """Number of ticks."""
        return int(self._ticks.shape[0])

    def ticks(self) -> FloatArray:
        """Read-only view of the tick buffer (no copy)."""
        view = self._ticks.view()
        view.flags.writeable = False
        return view

    @property
    def cfg(self) -> AxisConfig:
        return self._cfg

    @property
    def lower(self) -> float:
        return float(self._ticks[0])

    @property
    def upper(self) -> float:
        return float(self._ticks[-1])

    def spacing(self) -> FloatArray:
        """Widths ``x[i+1] - x[i]``, shape ``(n-1,)``."""
        return np.diff(self._ticks)

    # --- value semantics ----------------------------------------------------

    def copy(self) -> Axis:
        """Deep copy with an independent buffer."""
        out = Axis._allocate(self._ticks.shape[0], self._cfg)
        out._ticks[:] = self._ticks
        return out

    def __copy__(self) -> Axis:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Axis:
        return self.copy()

    def move(self) -> Axis:
        """Transfer the buffer to a new axis, leaving this one empty.

        The emptied axis has size 0 and should not be indexed again.
        """
        out = Axis._allocate(0, self._cfg)
        out._ticks, self._ticks = self._ticks, out._ticks
        return out

    def assign(self, other: Axis) -> Axis:
        """Copy-and-swap assignment of ``other``'s ticks into this axis.

        Self-assignment is a no-op in effect. If copying fails this axis is
        left untouched.
        """
        tmp = other.copy()
        self._ticks, tmp._ticks = tmp._ticks, self._ticks
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Axis):
            return NotImplemented
        return bool(np.array_equal(self._ticks, other._ticks))

    __hash__ = None  # type: ignore[assignment]

    # --- text ---------------------------------------------------------------

    def __str__(self) -> str:
        return "(" + " ".join(f"{t:g}" for t in self._ticks.tolist()) + ")"

    def __repr__(self) -> str:
        return f"Axis(n={self.size()}, ticks={self})"
