"""Statistical layout engine for box-and-whisker charts."""

from boxplotchart.layout_engine.algorithms.nice_scale import AxisScale, build_axis_scale, nice_range
from boxplotchart.layout_engine.algorithms.quartile import Series, Summary, compute_summary
from boxplotchart.layout_engine.chart_assembler import ChartDocument, assemble_chart
from boxplotchart.layout_engine.chart_config import ChartConfig
from boxplotchart.layout_engine.layout_mapper import LayoutMapper, SeriesGeometry
from boxplotchart.layout_engine.pipeline import build_chart, compute_summaries, summary_report, summary_table
from boxplotchart.layout_engine.primitives import MarkerStyle, Role

__all__ = [
    "AxisScale",
    "ChartConfig",
    "ChartDocument",
    "LayoutMapper",
    "MarkerStyle",
    "Role",
    "Series",
    "SeriesGeometry",
    "Summary",
    "assemble_chart",
    "build_axis_scale",
    "build_chart",
    "compute_summaries",
    "compute_summary",
    "nice_range",
    "summary_report",
    "summary_table",
]
