"""Layout mapper: data values to drawing coordinates.

Drawing coordinates grow downward while data grows upward, so the vertical
mapping is inverted:

    y = top_margin + H * (scale.hi - value) / (scale.hi - scale.lo)

Horizontally each series gets a fixed-width slot, left to right in input
order, with slot_gap before the first slot, between slots and after the last.
If the slots need less room than plot_width they are centered in it; if they
need more, the plot area grows to fit them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from boxplotchart.errors import InvalidLayoutError
from boxplotchart.layout_engine.algorithms.nice_scale import AxisScale
from boxplotchart.layout_engine.algorithms.quartile import Summary
from boxplotchart.layout_engine.chart_config import ChartConfig
from boxplotchart.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point


@dataclass(frozen=True)
class Box:
    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top


@dataclass(frozen=True)
class PlotArea:
    """The rectangle the data is drawn in, plus the overall chart size."""
    left: float
    top: float
    width: float
    height: float
    chart_width: float
    chart_height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height


@dataclass(frozen=True)
class SeriesGeometry:
    """Drawing-space geometry for one series."""
    name: str
    index: int
    slot_left: float
    slot_width: float
    center_x: float
    box: Box
    median: Segment
    upper_whisker: Segment  # from mapped(whisker_high) down to mapped(Q3)
    lower_whisker: Segment  # from mapped(Q1) down to mapped(whisker_low)
    upper_cap: Segment
    lower_cap: Segment
    outliers: tuple[Point, ...]
    label_anchor: Point


class LayoutMapper:
    """Maps summaries onto a chart using one shared AxisScale.

    Attributes:
        config: Validated ChartConfig.
        scale: Shared AxisScale.
        series_count: Number of slots to lay out.
        plot_area: Resulting plot rectangle and chart size.
    """

    def __init__(self, config: ChartConfig, scale: AxisScale, series_count: int) -> None:
        """Validate inputs and compute the plot area.

        Raises:
            InvalidLayoutError: If config has a bad dimension, series_count < 1,
                or the scale has zero height.
        """
        config.validate()
        if series_count < 1:
            raise InvalidLayoutError("series_count", series_count)
        if not scale.hi > scale.lo:
            raise InvalidLayoutError("scale", (scale.lo, scale.hi), "must have hi > lo")

        self.config = config
        self.scale = scale
        self.series_count = series_count

        slots_width = series_count * config.slot_width + (series_count + 1) * config.slot_gap
        area_width = max(config.plot_width, slots_width)
        self._slots_origin = config.left_margin + (area_width - slots_width) / 2
        self.plot_area = PlotArea(
            left=config.left_margin,
            top=config.top_margin,
            width=area_width,
            height=config.plot_height,
            chart_width=config.left_margin + area_width + config.right_margin,
            chart_height=config.top_margin + config.plot_height + config.bottom_margin,
        )
        logger.debug(
            f"LayoutMapper: series={series_count} plot_area={area_width}x{config.plot_height} "
            f"chart={self.plot_area.chart_width}x{self.plot_area.chart_height}"
        )

    def value_to_y(self, value: float) -> float:
        """Vertical drawing coordinate for a data value (inverted)."""
        # Divide first: plot_height * (hi - value) can overflow for spans near the float limit.
        fraction = (self.scale.hi - value) / (self.scale.hi - self.scale.lo)
        return self.config.top_margin + self.config.plot_height * fraction

    def slot_left(self, index: int) -> float:
        if not 0 <= index < self.series_count:
            raise IndexError(f"slot index {index} out of range for {self.series_count} series")
        return self._slots_origin + self.config.slot_gap + index * (self.config.slot_width + self.config.slot_gap)

    def slot_center(self, index: int) -> float:
        return self.slot_left(index) + self.config.slot_width / 2

    def _cap(self, center_x: float, y: float) -> Segment:
        half = self.config.cap_width / 2
        return Segment(Point(center_x - half, y), Point(center_x + half, y))

    def map_summary(self, index: int, summary: Summary) -> SeriesGeometry:
        """Geometry for the series in slot ``index``."""
        cfg = self.config
        left = self.slot_left(index)
        cx = left + cfg.slot_width / 2

        y_q1 = self.value_to_y(summary.q1)
        y_q3 = self.value_to_y(summary.q3)
        y_median = self.value_to_y(summary.median)
        y_whisker_high = self.value_to_y(summary.whisker_high)
        y_whisker_low = self.value_to_y(summary.whisker_low)

        # Q3 maps above Q1 because of the inversion.
        box = Box(left=left + cfg.box_padding, top=y_q3, right=left + cfg.slot_width - cfg.box_padding, bottom=y_q1)

        return SeriesGeometry(
            name=summary.name,
            index=index,
            slot_left=left,
            slot_width=cfg.slot_width,
            center_x=cx,
            box=box,
            median=Segment(Point(box.left, y_median), Point(box.right, y_median)),
            upper_whisker=Segment(Point(cx, y_whisker_high), Point(cx, y_q3)),
            lower_whisker=Segment(Point(cx, y_q1), Point(cx, y_whisker_low)),
            upper_cap=self._cap(cx, y_whisker_high),
            lower_cap=self._cap(cx, y_whisker_low),
            outliers=tuple(Point(cx, self.value_to_y(v)) for v in summary.outliers),
            label_anchor=Point(cx, self.plot_area.bottom + cfg.label_offset),
        )

    def map_all(self, summaries: Sequence[Summary]) -> list[SeriesGeometry]:
        """Geometry for every summary, in input order."""
        if len(summaries) != self.series_count:
            raise ValueError(f"Expected {self.series_count} summaries, got {len(summaries)}")
        return [self.map_summary(i, s) for i, s in enumerate(summaries)]
