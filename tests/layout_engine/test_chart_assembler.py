"""Unit tests for chart assembly order and primitive content."""

import pytest

from boxplotchart.layout_engine.algorithms.nice_scale import build_axis_scale
from boxplotchart.layout_engine.algorithms.quartile import compute_summary
from boxplotchart.layout_engine.chart_assembler import assemble_chart
from boxplotchart.layout_engine.chart_config import ChartConfig
from boxplotchart.layout_engine.layout_mapper import LayoutMapper
from boxplotchart.layout_engine.primitives import Line, Marker, MarkerStyle, Rect, Role, Text


def _assemble(config, data):
    summaries = [compute_summary(v, name=k) for k, v in data.items()]
    scale = build_axis_scale(summaries, min_ticks=config.min_ticks, max_ticks=config.max_ticks)
    mapper = LayoutMapper(config, scale, len(summaries))
    return assemble_chart(mapper.map_all(summaries), mapper), mapper


@pytest.fixture
def data():
    return {
        "A": [1, 2, 3, 4, 5],
        "B": [48, 50, 50, 50, 50, 50, 60, 118],
    }


def test_axis_layer_comes_first(data):
    doc, mapper = _assemble(ChartConfig(), data)
    n_ticks = len(doc.scale.ticks)
    head = doc.primitives[: 2 * n_ticks]
    assert [p.role for p in head] == [Role.GRID_LINE, Role.TICK_LABEL] * n_ticks
    assert all(p.series is None for p in head)
    assert [p.role for p in doc.primitives[2 * n_ticks: 2 * n_ticks + 2]] == [Role.AXIS_LINE, Role.AXIS_LINE]
    first_series_idx = next(i for i, p in enumerate(doc.primitives) if p.series is not None)
    assert all(p.series is None for p in doc.primitives[:first_series_idx])
    assert all(p.series is not None for p in doc.primitives[first_series_idx:])


def test_grid_lines_align_with_ticks(data):
    doc, mapper = _assemble(ChartConfig(), data)
    grid = doc.by_role(Role.GRID_LINE)
    labels = doc.by_role(Role.TICK_LABEL)
    assert len(grid) == len(doc.scale.ticks) == len(labels)
    for line, label, tick in zip(grid, labels, doc.scale.ticks):
        assert isinstance(line, Line)
        assert line.y1 == line.y2 == mapper.value_to_y(tick)
        assert line.x1 == mapper.plot_area.left
        assert line.x2 == mapper.plot_area.right
        assert label.text == doc.scale.format_tick(tick)
        assert label.y == line.y1


def test_series_primitives_in_input_order(data):
    doc, _ = _assemble(ChartConfig(), data)
    series_order = []
    for p in doc.primitives:
        if p.series is not None and (not series_order or series_order[-1] != p.series):
            series_order.append(p.series)
    assert series_order == ["A", "B"]

    a = doc.for_series("A")
    assert [p.role for p in a] == [
        Role.BOX, Role.MEDIAN, Role.WHISKER, Role.WHISKER, Role.WHISKER_CAP, Role.WHISKER_CAP, Role.SERIES_LABEL,
    ]
    assert isinstance(a[0], Rect)
    assert isinstance(a[-1], Text) and a[-1].text == "A"


def test_outliers_use_configured_marker(data):
    doc, _ = _assemble(ChartConfig(outlier_marker=MarkerStyle.DIAMOND, outlier_radius=4), data)
    markers = doc.by_role(Role.OUTLIER)
    assert len(markers) == 1
    assert isinstance(markers[0], Marker)
    assert markers[0].style is MarkerStyle.DIAMOND
    assert markers[0].radius == 4
    assert markers[0].series == "B"


def test_title_and_units_optional(data):
    doc, _ = _assemble(ChartConfig(), data)
    assert doc.by_role(Role.TITLE) == []
    assert doc.by_role(Role.UNITS_LABEL) == []

    doc, _ = _assemble(ChartConfig(title="Latency", units="ms"), data)
    (title,) = doc.by_role(Role.TITLE)
    (units,) = doc.by_role(Role.UNITS_LABEL)
    assert title.text == "Latency"
    assert units.text == "ms"
    assert units.rotation == -90.0


def test_document_size_matches_plot_area(data):
    doc, mapper = _assemble(ChartConfig(), data)
    assert doc.width == mapper.plot_area.chart_width
    assert doc.height == mapper.plot_area.chart_height
