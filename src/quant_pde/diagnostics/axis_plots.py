from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from ..numerics.axis import Axis
from ._mpl import get_plt, pretty_ax

if TYPE_CHECKING:
    from matplotlib.axes import Axes


def plot_axis_spacing(
    axis: Axis,
    *,
    ax: Axes | None = None,
    logy: bool = False,
    label: str | None = None,
    mark: float | None = None,
) -> Axes:
    """Plot cell width against the left tick of each cell.

    Useful to eyeball where a hand-written grid is dense (around the strike)
    and how it coarsens towards the far boundary.
    """
    if axis.size() < 2:
        raise ValueError("Need at least 2 ticks to plot spacing")

    x = axis.ticks()
    h = np.diff(x)

    if ax is None:
        plt = get_plt()
        _, ax = plt.subplots(figsize=(8, 4), constrained_layout=True)

    ax.step(x[:-1], h, where="post", label=label or f"n={axis.size()}")
    ax.plot(x[:-1], h, "o", ms=3)
    if mark is not None:
        ax.axvline(float(mark), ls="--", alpha=0.6, label=f"x={mark:g}")
    if logy:
        ax.set_yscale("log")

    ax.set_xlabel("tick")
    ax.set_ylabel("width")
    ax.set_title("Axis spacing")
    ax.legend()
    pretty_ax(ax)
    return ax
