# tests/test_axis_refine.py
import warnings

import numpy as np
import pytest

from quant_pde import Axis, AxisConfig, AxisRefinementError


def test_refine_concrete_scenario() -> None:
    ax = Axis([0.0, 10.0, 20.0])

    once = ax.refine()
    np.testing.assert_array_equal(once.ticks(), [0.0, 5.0, 10.0, 15.0, 20.0])
    assert once.size() == 5

    twice = once.refine()
    np.testing.assert_array_equal(
        twice.ticks(), [0.0, 2.5, 5.0, 7.5, 10.0, 12.5, 15.0, 17.5, 20.0]
    )
    assert twice.size() == 9
    assert str(twice) == "(0 2.5 5 7.5 10 12.5 15 17.5 20)"


@pytest.mark.parametrize("n", [2, 3, 5, 34, 257])
def test_refine_cardinality(make_ticks, n: int) -> None:
    ax = Axis(make_ticks(n, seed=n))
    assert ax.refine().size() == 2 * n - 1


@pytest.mark.parametrize("n", [2, 7, 50])
def test_refine_preserves_originals_exactly(make_ticks, n: int) -> None:
    x = make_ticks(n, seed=10 + n)
    r = Axis(x).refine()

    # bitwise equality, not allclose
    np.testing.assert_array_equal(r.ticks()[0::2], x)


@pytest.mark.parametrize("n", [2, 7, 50])
def test_refine_inserts_midpoints(make_ticks, n: int) -> None:
    x = make_ticks(n, seed=20 + n)
    r = Axis(x).refine()

    np.testing.assert_array_equal(r.ticks()[1::2], (x[:-1] + x[1:]) / 2.0)
    for i in range(n - 1):
        assert r[2 * i] < r[2 * i + 1] < r[2 * i + 2]


@pytest.mark.parametrize("seed", range(5))
def test_refine_strictly_increasing(make_ticks, seed: int) -> None:
    r = Axis(make_ticks(40, seed=seed)).refine(3)
    assert np.all(np.diff(r.ticks()) > 0.0)


@pytest.mark.parametrize("levels", [0, 1, 2, 3, 5])
def test_repeated_refinement(bermudan_ticks, levels: int) -> None:
    ax = Axis(bermudan_ticks)
    n = ax.size()

    r = ax.refine(levels)

    assert r.size() == 2**levels * (n - 1) + 1
    np.testing.assert_array_equal(r.ticks()[:: 2**levels], bermudan_ticks)
    assert np.all(np.diff(r.ticks()) > 0.0)


def test_refine_levels_equals_chained_calls(bermudan_ticks) -> None:
    ax = Axis(bermudan_ticks)
    assert ax.refine(3) == ax.refine().refine().refine()


def test_refine_zero_levels_is_a_copy() -> None:
    ax = Axis([0.0, 1.0])
    r = ax.refine(0)

    assert r == ax
    assert r is not ax
    r[0] = -1.0
    assert ax[0] == 0.0


def test_refine_negative_levels_rejected() -> None:
    with pytest.raises(ValueError):
        _ = Axis([0.0, 1.0]).refine(-1)


def test_refine_leaves_source_untouched() -> None:
    ax = Axis([0.0, 10.0, 20.0])
    _ = ax.refine(2)
    np.testing.assert_array_equal(ax.ticks(), [0.0, 10.0, 20.0])


@pytest.mark.parametrize("cfg", [AxisConfig(True), AxisConfig(False)])
def test_refine_single_tick_rejected(cfg: AxisConfig) -> None:
    ax = Axis([42.0], cfg=cfg)
    with pytest.raises(AxisRefinementError):
        _ = ax.refine()


def test_refine_moved_from_axis_rejected() -> None:
    ax = Axis([0.0, 1.0])
    _ = ax.move()
    with pytest.raises(AxisRefinementError):
        _ = ax.refine()


def test_refined_axis_inherits_config() -> None:
    cfg = AxisConfig(check_monotone=True, check_bounds=True)
    r = Axis([0.0, 1.0], cfg=cfg).refine()

    assert r.cfg is cfg
    with pytest.raises(IndexError):
        _ = r[-1]


def test_collapsing_midpoint_warns_in_debug(debug_cfg) -> None:
    ax = Axis([1.0, float(np.nextafter(1.0, 2.0))], cfg=debug_cfg)

    with pytest.warns(RuntimeWarning):
        r = ax.refine()

    assert r.size() == 3


def test_collapsing_midpoint_silent_in_release(release_cfg) -> None:
    ax = Axis([1.0, float(np.nextafter(1.0, 2.0))], cfg=release_cfg)

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        r = ax.refine()

    assert r.size() == 3
