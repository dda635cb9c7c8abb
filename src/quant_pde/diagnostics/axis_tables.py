from __future__ import annotations

import numpy as np
import pandas as pd

from ..numerics.axis import Axis

__all__ = ["spacing_frame", "refinement_table"]


def spacing_frame(axis: Axis) -> pd.DataFrame:
    """One row per cell ``[x_i, x_{i+1}]`` with its width."""
    x = axis.ticks()
    return pd.DataFrame(
        {
            "left": x[:-1],
            "right": x[1:],
            "width": np.diff(x),
        }
    )


def _level_row(level: int, axis: Axis) -> dict[str, float | int]:
    h = axis.spacing()
    if h.size == 0:
        min_h = max_h = max_ratio = np.nan
    else:
        min_h = float(np.min(h))
        max_h = float(np.max(h))
        # Largest jump in width between neighbouring cells (>= 1)
        if h.size > 1:
            r = h[1:] / h[:-1]
            max_ratio = float(np.max(np.maximum(r, 1.0 / r)))
        else:
            max_ratio = 1.0

    return {
        "level": int(level),
        "n_ticks": axis.size(),
        "lower": axis.lower,
        "upper": axis.upper,
        "min_spacing": min_h,
        "max_spacing": max_h,
        "max_ratio": max_ratio,
    }


def refinement_table(axis: Axis, levels: int) -> pd.DataFrame:
    """Describe ``axis`` and its successive refinements.

    Row ``k`` summarizes ``axis.refine(k)`` for ``k = 0..levels``. Midpoint
    refinement halves every width, so ``min_spacing`` and ``max_spacing``
    halve per level while ``max_ratio`` is the same at every level, level 0
    included: both halves of a split cell share its width, so only the
    original cell boundaries carry a width jump.
    """
    levels = int(levels)
    if levels < 0:
        raise ValueError("levels must be >= 0")

    rows = [_level_row(0, axis)]
    cur = axis
    for k in range(1, levels + 1):
        cur = cur.refine()
        rows.append(_level_row(k, cur))
    return pd.DataFrame(rows)
