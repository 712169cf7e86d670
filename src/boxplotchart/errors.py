"""Error types raised by the box plot layout engine.

All errors subclass ValueError so callers that already guard against bad
input with ``except ValueError`` keep working. Every error is terminal for
the current render: nothing is retried and nothing is partially drawn.
"""

from __future__ import annotations

from typing import Any, Optional


class BoxPlotChartError(ValueError):
    """Base class for all boxplotchart errors."""


class NoDataError(BoxPlotChartError):
    """Raised when no series are supplied."""

    def __init__(self, message: str = "No data series supplied") -> None:
        super().__init__(message)


class InvalidSeriesError(BoxPlotChartError):
    """Raised when a series cannot be summarized (empty or non-finite values).

    Attributes:
        series_name: Name of the offending series (None if unnamed).
        reason: Short description of what is wrong.
    """

    def __init__(self, series_name: Optional[str], reason: str) -> None:
        self.series_name = series_name
        self.reason = reason
        label = repr(series_name) if series_name is not None else "<unnamed>"
        super().__init__(f"Invalid series {label}: {reason}")


class InvalidLayoutError(BoxPlotChartError):
    """Raised when a layout dimension or option is out of range.

    Attributes:
        field: Name of the configuration field.
        value: The rejected value.
    """

    def __init__(self, field: str, value: Any, reason: str = "must be positive") -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid layout: {field}={value!r} {reason}")


class ScaleRangeError(BoxPlotChartError):
    """Raised when the data range cannot be represented on a finite axis.

    Attributes:
        lo: Lower data bound.
        hi: Upper data bound.
    """

    def __init__(self, lo: float, hi: float) -> None:
        self.lo = lo
        self.hi = hi
        super().__init__(f"Data range [{lo}, {hi}] is too wide for a finite axis scale")
