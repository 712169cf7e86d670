"""Chart assembler: compose axis and series geometry into one primitive document.

Order is fixed so two renders of the same input are identical:
1. Axis layer: per tick a grid line then its label, then the Y and X axis
   lines, then the optional title and units label.
2. Series layer, in input order: box, median, upper whisker, lower whisker,
   upper cap, lower cap, outlier markers (ascending value), series label.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

from boxplotchart.layout_engine.algorithms.nice_scale import AxisScale
from boxplotchart.layout_engine.layout_mapper import LayoutMapper, Segment, SeriesGeometry
from boxplotchart.layout_engine.primitives import (
    Line,
    Marker,
    MarkerStyle,
    Primitive,
    Rect,
    Role,
    Text,
    TextAnchor,
)


@dataclass(frozen=True)
class ChartDocument:
    """Ordered drawable primitives plus the overall drawing size."""
    width: float
    height: float
    primitives: tuple[Primitive, ...]
    scale: AxisScale

    def by_role(self, role: Role) -> list[Primitive]:
        return [p for p in self.primitives if p.role is role]

    def for_series(self, name: str) -> list[Primitive]:
        return [p for p in self.primitives if p.series == name]


def _line(seg: Segment, role: Role, series: str) -> Line:
    return Line(seg.start.x, seg.start.y, seg.end.x, seg.end.y, role=role, series=series)


def axis_primitives(mapper: LayoutMapper) -> Iterator[Primitive]:
    """Grid lines, tick labels, axis lines, title and units label."""
    scale, area, config = mapper.scale, mapper.plot_area, mapper.config
    for tick, label in zip(scale.ticks, scale.tick_labels()):
        y = mapper.value_to_y(tick)
        yield Line(area.left, y, area.right, y, role=Role.GRID_LINE)
        yield Text(area.left - config.tick_label_offset, y, label, role=Role.TICK_LABEL, anchor=TextAnchor.END)

    yield Line(area.left, area.top, area.left, area.bottom, role=Role.AXIS_LINE)
    yield Line(area.left, area.bottom, area.right, area.bottom, role=Role.AXIS_LINE)

    if config.title:
        yield Text(area.left + area.width / 2, area.top / 2, config.title, role=Role.TITLE)
    if config.units:
        yield Text(area.left / 4, area.top + area.height / 2, config.units, role=Role.UNITS_LABEL, rotation=-90.0)


def series_primitives(geom: SeriesGeometry, outlier_radius: float, marker: MarkerStyle) -> Iterator[Primitive]:
    """Primitives for one series."""
    name = geom.name
    box = geom.box
    yield Rect(box.left, box.top, box.width, box.height, role=Role.BOX, series=name)
    yield _line(geom.median, Role.MEDIAN, name)
    yield _line(geom.upper_whisker, Role.WHISKER, name)
    yield _line(geom.lower_whisker, Role.WHISKER, name)
    yield _line(geom.upper_cap, Role.WHISKER_CAP, name)
    yield _line(geom.lower_cap, Role.WHISKER_CAP, name)
    for pt in geom.outliers:
        yield Marker(pt.x, pt.y, outlier_radius, marker, series=name)
    yield Text(geom.label_anchor.x, geom.label_anchor.y, name, role=Role.SERIES_LABEL, series=name)


def assemble_chart(
    geometries: Sequence[SeriesGeometry],
    mapper: LayoutMapper,
) -> ChartDocument:
    """Collect axis and series primitives into one ChartDocument.

    Pure composition over geometry already produced by ``mapper``; raises nothing.
    """
    config, area = mapper.config, mapper.plot_area
    primitives: list[Primitive] = list(axis_primitives(mapper))
    for geom in geometries:
        primitives.extend(series_primitives(geom, config.outlier_radius, config.outlier_marker))
    return ChartDocument(
        width=area.chart_width,
        height=area.chart_height,
        primitives=tuple(primitives),
        scale=mapper.scale,
    )
