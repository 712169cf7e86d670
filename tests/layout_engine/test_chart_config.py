"""Unit tests for ChartConfig validation and serialization."""

from dataclasses import replace

import pytest

from boxplotchart.errors import InvalidLayoutError
from boxplotchart.layout_engine.chart_config import ChartConfig
from boxplotchart.layout_engine.primitives import MarkerStyle


def test_defaults_are_valid():
    cfg = ChartConfig()
    assert cfg.validate() is cfg
    assert cfg.outlier_k == 1.5
    assert (cfg.min_ticks, cfg.max_ticks) == (4, 10)


def test_to_dict_from_dict_round_trip():
    cfg = ChartConfig(plot_width=500, title="T", units="s", outlier_marker=MarkerStyle.CROSS, max_ticks=8)
    d = cfg.to_dict()
    assert d["outlier_marker"] == "cross"
    restored = ChartConfig.from_dict(d)
    assert restored == replace(cfg, plot_width=500.0)


def test_from_dict_missing_keys_use_defaults():
    cfg = ChartConfig.from_dict({"plot_height": "120"})
    assert cfg.plot_height == 120.0
    assert cfg.plot_width == ChartConfig().plot_width
    assert cfg.title is None


def test_from_dict_unknown_marker_raises():
    with pytest.raises(ValueError):
        ChartConfig.from_dict({"outlier_marker": "star"})


@pytest.mark.parametrize(
    "field_name,value",
    [
        ("top_margin", -1),
        ("slot_gap", -0.5),
        ("cap_width", -2),
        ("outlier_radius", -1),
        ("plot_width", float("inf")),
        ("plot_height", float("nan")),
    ],
)
def test_invalid_dimensions(field_name, value):
    with pytest.raises(InvalidLayoutError) as exc_info:
        replace(ChartConfig(), **{field_name: value}).validate()
    assert exc_info.value.field == field_name


def test_zero_margins_are_allowed():
    ChartConfig(top_margin=0, bottom_margin=0, left_margin=0, right_margin=0, slot_gap=0).validate()


def test_padding_leaving_no_box_raises():
    with pytest.raises(InvalidLayoutError) as exc_info:
        ChartConfig(slot_width=20, box_padding=10).validate()
    assert exc_info.value.field == "box_padding"


@pytest.mark.parametrize("min_ticks,max_ticks,bad_field", [(1, 10, "min_ticks"), (5, 4, "max_ticks")])
def test_invalid_tick_band(min_ticks, max_ticks, bad_field):
    with pytest.raises(InvalidLayoutError) as exc_info:
        ChartConfig(min_ticks=min_ticks, max_ticks=max_ticks).validate()
    assert exc_info.value.field == bad_field


def test_negative_outlier_k_raises():
    with pytest.raises(InvalidLayoutError) as exc_info:
        ChartConfig(outlier_k=-1).validate()
    assert exc_info.value.field == "outlier_k"


def test_error_message_names_field_and_value():
    with pytest.raises(InvalidLayoutError) as exc_info:
        ChartConfig(plot_height=0).validate()
    assert "plot_height" in str(exc_info.value)
    assert "0" in str(exc_info.value)
