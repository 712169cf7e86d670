"""End-to-end box plot pipeline and summary reports.

    series -> compute_summaries -> build_axis_scale -> LayoutMapper -> assemble_chart

Every step is a pure function of its inputs and the ChartConfig; running the
pipeline twice on the same input gives identical documents.
"""

from __future__ import annotations

from typing import Mapping, Optional, Sequence, Union

import pandas as pd

from boxplotchart.errors import NoDataError
from boxplotchart.layout_engine.algorithms.nice_scale import AxisScale, build_axis_scale
from boxplotchart.layout_engine.algorithms.quartile import DEFAULT_OUTLIER_K, Series, Summary, summarize_series
from boxplotchart.layout_engine.chart_assembler import ChartDocument, assemble_chart
from boxplotchart.layout_engine.chart_config import ChartConfig
from boxplotchart.layout_engine.layout_mapper import LayoutMapper
from boxplotchart.layout_engine.series_loader import series_from_mapping
from boxplotchart.utils.logging import get_logger

logger = get_logger(__name__)

SeriesInput = Union[Mapping[str, Sequence[float]], Sequence[Series]]

# Columns of summary_table(), in order.
SUMMARY_COLUMNS = [
    "name", "count", "min", "whisker_low", "q1", "median", "q3", "whisker_high", "max",
    "iqr", "lower_fence", "upper_fence", "n_outliers",
]


def _as_series_list(series: SeriesInput) -> list[Series]:
    if isinstance(series, Mapping):
        return series_from_mapping(series)
    return list(series)


def compute_summaries(series: SeriesInput, *, k: float = DEFAULT_OUTLIER_K) -> list[Summary]:
    """Summarize every series, in input order.

    Raises:
        NoDataError: If no series are supplied.
        InvalidSeriesError: If any series is empty or non-finite.
    """
    series_list = _as_series_list(series)
    if not series_list:
        raise NoDataError()
    summaries = [summarize_series(s, k=k) for s in series_list]
    for s in summaries:
        logger.debug(
            f"Summary {s.name!r}: n={s.count} min={s.minimum} q1={s.q1} median={s.median} "
            f"q3={s.q3} max={s.maximum} outliers={len(s.outliers)}"
        )
    return summaries


def build_chart(series: SeriesInput, config: Optional[ChartConfig] = None) -> ChartDocument:
    """Run the whole layout pipeline.

    Args:
        series: {name: values} mapping or a sequence of Series.
        config: Layout options. Defaults to ChartConfig().

    Returns:
        ChartDocument ready for a renderer.

    Raises:
        InvalidLayoutError: If config is out of range (checked before any data work).
        NoDataError: If no series are supplied.
        InvalidSeriesError: If a series is empty or non-finite.
        ScaleRangeError: If the data range is too wide for a finite axis.
    """
    config = (config or ChartConfig()).validate()
    summaries = compute_summaries(series, k=config.outlier_k)
    logger.info(f"build_chart: {len(summaries)} series, {sum(s.count for s in summaries)} values")

    scale = build_axis_scale(summaries, min_ticks=config.min_ticks, max_ticks=config.max_ticks)
    mapper = LayoutMapper(config, scale, len(summaries))
    geometries = mapper.map_all(summaries)
    document = assemble_chart(geometries, mapper)

    logger.debug(f"build_chart: {len(document.primitives)} primitives, size={document.width}x{document.height}")
    return document


def summary_table(summaries: Sequence[Summary]) -> pd.DataFrame:
    """One row per series with the five-number summary, fences and outlier count."""
    if not summaries:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    rows = []
    for s in summaries:
        rows.append({
            "name": s.name,
            "count": s.count,
            "min": s.minimum,
            "whisker_low": s.whisker_low,
            "q1": s.q1,
            "median": s.median,
            "q3": s.q3,
            "whisker_high": s.whisker_high,
            "max": s.maximum,
            "iqr": s.iqr,
            "lower_fence": s.lower_fence,
            "upper_fence": s.upper_fence,
            "n_outliers": len(s.outliers),
        })
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def outliers_table(summaries: Sequence[Summary]) -> pd.DataFrame:
    """Long-form table of outliers: one row per (series, value), with side 'low' or 'high'."""
    rows = []
    for s in summaries:
        rows.extend({"name": s.name, "value": v, "side": "low"} for v in s.lower_outliers)
        rows.extend({"name": s.name, "value": v, "side": "high"} for v in s.upper_outliers)
    return pd.DataFrame(rows, columns=["name", "value", "side"])


def summary_report(summaries: Sequence[Summary], scale: Optional[AxisScale] = None) -> str:
    """Multi-section TSV report: scale, stats table, outliers.

    Suitable for print() or copy/paste into a spreadsheet.
    """
    lines: list[str] = []

    if scale is not None:
        lines.append("# Scale")
        lines.append(f"lo\t{scale.format_tick(scale.lo)}")
        lines.append(f"hi\t{scale.format_tick(scale.hi)}")
        lines.append(f"step\t{scale.format_tick(scale.step)}")
        lines.append("ticks\t" + "\t".join(scale.tick_labels()))
        lines.append("")

    lines.append("# Stats (one row per series)")
    stats_df = summary_table(summaries)
    if len(stats_df) > 0:
        lines.append(stats_df.to_csv(sep="\t", index=False))
    else:
        lines.append("(no data)")
    lines.append("")

    lines.append("# Outliers")
    out_df = outliers_table(summaries)
    if len(out_df) > 0:
        lines.append(out_df.to_csv(sep="\t", index=False))
    else:
        lines.append("(none)")

    return "\n".join(lines)
