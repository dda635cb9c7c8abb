"""Pytest helpers for the quant_pde library."""

from __future__ import annotations

import numpy as np
import pytest

from quant_pde import AxisConfig


@pytest.fixture
def bermudan_ticks() -> list[float]:
    """Hand-written Bermudan put grid, dense around K=100."""
    return [
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


@pytest.fixture
def debug_cfg() -> AxisConfig:
    """Validation forced on, independent of ``python -O``."""
    return AxisConfig(check_monotone=True)


@pytest.fixture
def release_cfg() -> AxisConfig:
    return AxisConfig(check_monotone=False)


@pytest.fixture
def make_ticks():
    """Factory for strictly increasing ticks with irregular spacing."""

    def _make(n: int, seed: int = 0) -> np.ndarray:
        rng = np.random.default_rng(seed)
        steps = rng.uniform(0.05, 3.0, size=n - 1)
        x0 = rng.normal()
        return x0 + np.concatenate(([0.0], np.cumsum(steps)))

    return _make
