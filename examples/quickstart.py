"""Build the spatial axis of a Bermudan put and refine it.

Run from the repository root:

    PYTHONPATH=src python examples/quickstart.py
"""

from __future__ import annotations

from quant_pde import Axis
from quant_pde.diagnostics import refinement_table

# Dense around the strike K=100, coarse out to the far boundary.
BERMUDAN_PUT_TICKS = [
    0.0, 10.0, 20.0, 30.0, 40.0, 50.0, 60.0, 70.0,
    75.0, 80.0,
    84.0, 88.0, 92.0,
    94.0, 96.0, 98.0, 100.0, 102.0, 104.0, 106.0, 108.0, 110.0,
    114.0, 118.0,
    123.0,
    130.0, 140.0, 150.0,
    175.0,
    225.0,
    300.0,
    750.0,
    2000.0,
    10000.0,
]  # fmt: skip


def main() -> None:
    axis = Axis(BERMUDAN_PUT_TICKS)
    print(f"base axis: {axis.size()} ticks on [{axis.lower:g}, {axis.upper:g}]")

    for levels in range(3):
        refined = axis.refine(levels)
        print(f"R={levels}: {refined.size()} ticks")

    print(refinement_table(axis, levels=3).to_string(index=False))

    print(Axis.range(0.0, 10.0, 200.0))


if __name__ == "__main__":
    main()
