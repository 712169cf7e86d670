"""Unit tests for nice tick selection and the shared axis scale."""

import numpy as np
import pytest

from boxplotchart.errors import BoxPlotChartError, NoDataError, ScaleRangeError
from boxplotchart.layout_engine.algorithms.nice_scale import (
    NiceStep,
    build_axis_scale,
    expand_degenerate,
    nice_range,
)
from boxplotchart.layout_engine.algorithms.quartile import compute_summary


def test_nice_step_ticks_avoid_float_drift():
    step = NiceStep(1, -1)
    assert step.tick(3) == 0.3
    assert step.value == 0.1
    assert step.decimals == 1
    assert NiceStep(5, 1).tick(2) == 100.0
    assert NiceStep(2, 0).decimals == 0


def test_nice_range_two_separated_series():
    """[1, 104] -> step 20, [0, 120], 7 ticks."""
    rng = nice_range(1, 104)
    assert rng.step == 20.0
    assert rng.lo == 0.0
    assert rng.hi == 120.0
    assert rng.ticks == (0.0, 20.0, 40.0, 60.0, 80.0, 100.0, 120.0)


def test_nice_range_negative_lower_bound():
    rng = nice_range(-7, 23)
    assert rng.step == 5.0
    assert rng.lo == -10.0
    assert rng.hi == 25.0
    assert rng.tick_count == 8


def test_nice_range_fractional_step_ticks_are_clean():
    rng = nice_range(0.3, 0.7)
    assert rng.step == 0.05
    assert rng.lo == 0.3
    assert rng.hi == 0.7
    assert rng.ticks[1] == 0.35
    assert rng.ticks == tuple(round(0.3 + 0.05 * i, 2) for i in range(9))


def test_nice_range_keeps_bounds_already_on_step():
    rng = nice_range(0, 100)
    assert rng.lo == 0.0
    assert rng.hi == 100.0
    assert 4 <= rng.tick_count <= 10


@pytest.mark.parametrize("lo,hi", [(5, 5), (6, 5), (float("nan"), 1), (0, float("inf"))])
def test_nice_range_rejects_bad_bounds(lo, hi):
    with pytest.raises(ValueError):
        nice_range(lo, hi)


@pytest.mark.parametrize("min_ticks,max_ticks", [(1, 10), (6, 5)])
def test_nice_range_rejects_bad_band(min_ticks, max_ticks):
    with pytest.raises(ValueError):
        nice_range(0, 10, min_ticks=min_ticks, max_ticks=max_ticks)


@pytest.mark.parametrize("seed", range(10))
def test_nice_range_tick_count_within_band_and_covers_data(seed):
    rng = np.random.default_rng(seed)
    for _ in range(50):
        magnitude = 10.0 ** rng.integers(-4, 7)
        lo = float(rng.uniform(-1, 1) * magnitude)
        hi = lo + float(rng.uniform(0.01, 5) * magnitude)
        result = nice_range(lo, hi)
        assert 4 <= result.tick_count <= 10, (lo, hi, result)
        assert result.lo <= lo
        assert result.hi >= hi
        assert result.ticks[0] == result.lo
        assert result.ticks[-1] == result.hi


def test_expand_degenerate_uses_at_least_one_unit():
    assert expand_degenerate(10.0) == (9.0, 11.0)
    assert expand_degenerate(0.0) == (-1.0, 1.0)
    assert expand_degenerate(1000.0) == (950.0, 1050.0)


def test_build_axis_scale_shared_across_series():
    summaries = [compute_summary([1, 2, 3, 4, 5], name="A"), compute_summary([100, 101, 102, 103, 104], name="B")]
    scale = build_axis_scale(summaries)
    assert (scale.data_min, scale.data_max) == (1.0, 104.0)
    assert scale.ticks == (0.0, 20.0, 40.0, 60.0, 80.0, 100.0, 120.0)
    assert scale.tick_labels() == ["0", "20", "40", "60", "80", "100", "120"]


def test_build_axis_scale_single_value_is_not_zero_height():
    scale = build_axis_scale([compute_summary([10])])
    assert scale.hi > scale.lo
    assert scale.lo <= 9.0 and scale.hi >= 11.0
    assert scale.ticks == (9.0, 9.5, 10.0, 10.5, 11.0)
    assert scale.tick_labels() == ["9.0", "9.5", "10.0", "10.5", "11.0"]


def test_build_axis_scale_includes_outliers():
    s = compute_summary([5, 6, 48, 52, 57, 61, 64, 72, 76, 77, 81, 85, 88])
    scale = build_axis_scale([s])
    for v in s.outliers:
        assert scale.contains(v)
    assert scale.contains(s.maximum)


def test_build_axis_scale_custom_band():
    s = compute_summary([0, 1000])
    scale = build_axis_scale([s], min_ticks=2, max_ticks=3)
    assert 2 <= len(scale.ticks) <= 3


def test_build_axis_scale_no_data():
    with pytest.raises(NoDataError):
        build_axis_scale([])


@pytest.mark.parametrize("lo,hi", [(-1e308, 1e308), (0.0, 1.7e308)])
def test_nice_range_too_wide_for_float(lo, hi):
    """A span (or its rounded range) past the float limit is a typed error, not OverflowError."""
    with pytest.raises(ScaleRangeError) as exc_info:
        nice_range(lo, hi)
    assert (exc_info.value.lo, exc_info.value.hi) == (lo, hi)
    assert isinstance(exc_info.value, BoxPlotChartError)


def test_build_axis_scale_degenerate_near_float_max():
    with pytest.raises(ScaleRangeError):
        build_axis_scale([compute_summary([1.79e308], name="huge")])


def test_build_axis_scale_large_finite_span():
    scale = build_axis_scale([compute_summary([-4e307, 0.0, 4e307])])
    assert scale.step == 1e307
    assert len(scale.ticks) == 9
    assert np.isfinite(scale.ticks).all()
