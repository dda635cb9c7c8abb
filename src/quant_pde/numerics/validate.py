"""
Small validation helpers shared by the axis constructors.

Kept separate so every construction path reports the same error types and
messages.
"""

from __future__ import annotations

import operator

import numpy as np

from ..exceptions import EmptyAxisError, NonFiniteAxisError, NonMonotonicAxisError


def assert_min_points(x: np.ndarray, n: int, name: str) -> None:
    if x.ndim != 1:
        raise ValueError(f"{name} must be 1D")
    if x.size < n:
        if x.size == 0:
            raise EmptyAxisError(f"{name} must not be empty")
        raise ValueError(f"{name} must have at least {n} points")


def assert_strictly_increasing(x: np.ndarray, name: str) -> None:
    if not np.all(np.isfinite(x)):
        raise NonFiniteAxisError(f"{name} must be finite")
    bad = np.flatnonzero(np.diff(x) <= 0)
    if bad.size:
        i = int(bad[0])
        raise NonMonotonicAxisError(
            f"{name} must be strictly increasing: "
            f"{name}[{i}]={x[i]!r} >= {name}[{i + 1}]={x[i + 1]!r}",
            index=i,
        )


def check_index(i: int, n: int) -> int:
    i = operator.index(i)
    if not (0 <= i < n):
        raise IndexError(f"tick index {i} out of range for axis of size {n}")
    return i
