"""
boxplotchart: statistical box-and-whisker chart layout.

This package provides:
- Quartile summaries with Tukey outliers (compute_summary)
- A shared "nice" Y-axis scale (build_axis_scale, nice_range)
- Layout of boxes, whiskers and outliers into drawing primitives (build_chart)
- SVG and Plotly renderers for the resulting ChartDocument
- Logging utilities for library and application use

For logging configuration in standalone scripts:
    ```python
    from boxplotchart.utils.logging import configure_logging
    configure_logging(level="DEBUG")
    ```

When used as a library, logging is handled by the parent application's configuration.
"""

import logging

from boxplotchart.utils.logging import configure_logging, get_logger

from boxplotchart.errors import (
    BoxPlotChartError,
    InvalidLayoutError,
    InvalidSeriesError,
    NoDataError,
    ScaleRangeError,
)
from boxplotchart.layout_engine import (
    AxisScale,
    ChartConfig,
    ChartDocument,
    MarkerStyle,
    Series,
    Summary,
    build_chart,
    compute_summary,
)
from boxplotchart.renderers import document_to_plotly, render_svg

# Ensure boxplotchart logger has NullHandler so logs don't propagate to root
# when no application has configured logging.
_logger = logging.getLogger("boxplotchart")
if not _logger.handlers:
    _logger.addHandler(logging.NullHandler())

__all__ = [
    "AxisScale",
    "BoxPlotChartError",
    "ChartConfig",
    "ChartDocument",
    "InvalidLayoutError",
    "InvalidSeriesError",
    "MarkerStyle",
    "NoDataError",
    "ScaleRangeError",
    "Series",
    "Summary",
    "build_chart",
    "compute_summary",
    "configure_logging",
    "document_to_plotly",
    "get_logger",
    "render_svg",
]

__version__ = "0.1.0"
