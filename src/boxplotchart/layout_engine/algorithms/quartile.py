"""
Quartile calculator: five-number summary and outliers for one series.

Quartile method (Tukey hinges):
- Sort values ascending.
- Median: middle value for odd counts, mean of the two middle values for even counts.
- Q1 / Q3: the same median rule applied to the lower / upper half.
  Even count: lower half = first n/2 values, upper half = last n/2 values.
  Odd count: the median element is excluded from both halves.
  A single value has empty halves, so Q1 = Q3 = median.

Outliers are values strictly outside [Q1 - k*IQR, Q3 + k*IQR]. A value exactly on
a fence is NOT an outlier. Whiskers extend to the most extreme non-outlier values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from boxplotchart.errors import InvalidSeriesError
from boxplotchart.utils.logging import get_logger

logger = get_logger(__name__)

# Standard Tukey fence multiplier.
DEFAULT_OUTLIER_K = 1.5


@dataclass(frozen=True)
class Series:
    """A named, ordered sequence of numeric values."""
    name: str
    values: tuple[float, ...]

    @classmethod
    def of(cls, name: str, values: Sequence[float]) -> "Series":
        return cls(name=str(name), values=tuple(float(v) for v in values))


@dataclass(frozen=True)
class Summary:
    """Five-number summary plus outliers for one series.

    ``minimum`` / ``maximum`` are the extremes of the whole series (outliers
    included). ``whisker_low`` / ``whisker_high`` are the extremes of the
    non-outlier subset.
    """
    name: str
    count: int
    minimum: float
    q1: float
    median: float
    q3: float
    maximum: float
    iqr: float
    lower_fence: float
    upper_fence: float
    whisker_low: float
    whisker_high: float
    lower_outliers: tuple[float, ...] = ()
    upper_outliers: tuple[float, ...] = ()

    @property
    def outliers(self) -> tuple[float, ...]:
        """All outliers in ascending order."""
        return self.lower_outliers + self.upper_outliers

    @property
    def min_value(self) -> float:
        """Smallest value to plot: least outlier if any, else the lower whisker."""
        return self.lower_outliers[0] if self.lower_outliers else self.whisker_low

    @property
    def max_value(self) -> float:
        """Largest value to plot: greatest outlier if any, else the upper whisker."""
        return self.upper_outliers[-1] if self.upper_outliers else self.whisker_high

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "count": self.count,
            "min": self.minimum,
            "q1": self.q1,
            "median": self.median,
            "q3": self.q3,
            "max": self.maximum,
            "iqr": self.iqr,
            "lower_fence": self.lower_fence,
            "upper_fence": self.upper_fence,
            "whisker_low": self.whisker_low,
            "whisker_high": self.whisker_high,
            "outliers": list(self.outliers),
        }


def median_of_sorted(arr: np.ndarray) -> float:
    """Median of an already sorted, non-empty 1D array."""
    n = len(arr)
    mid = n // 2
    if n % 2 == 1:
        return float(arr[mid])
    a, b = float(arr[mid - 1]), float(arr[mid])
    if (a < 0) == (b < 0):
        # Same sign: a + b could overflow, b - a cannot.
        return a + (b - a) / 2.0
    return (a + b) / 2.0


def split_halves(arr: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Return (lower_half, upper_half) of a sorted array, excluding the median element for odd n."""
    n = len(arr)
    half = n // 2
    if n % 2 == 0:
        return arr[:half], arr[half:]
    return arr[:half], arr[half + 1:]


def compute_summary(
    values: Sequence[float],
    *,
    name: Optional[str] = None,
    k: float = DEFAULT_OUTLIER_K,
) -> Summary:
    """Compute the five-number summary and outliers for one series.

    Args:
        values: Numeric values (any order, duplicates allowed).
        name: Series name, used for error context and carried on the Summary.
        k: Fence multiplier (default 1.5).

    Returns:
        Summary for the series.

    Raises:
        InvalidSeriesError: If values is empty or contains NaN/inf.
    """
    arr = np.asarray(list(values), dtype=float)
    if arr.size == 0:
        raise InvalidSeriesError(name, "series has no values")
    if not np.all(np.isfinite(arr)):
        raise InvalidSeriesError(name, "series contains non-finite values")

    arr = np.sort(arr, kind="stable")
    median = median_of_sorted(arr)

    lower, upper = split_halves(arr)
    # Single value: both halves are empty.
    q1 = median_of_sorted(lower) if len(lower) else median
    q3 = median_of_sorted(upper) if len(upper) else median

    iqr = q3 - q1
    lower_fence = q1 - k * iqr
    upper_fence = q3 + k * iqr

    lower_mask = arr < lower_fence
    upper_mask = arr > upper_fence
    inliers = arr[~(lower_mask | upper_mask)]

    if len(inliers):
        whisker_low = float(inliers[0])
        whisker_high = float(inliers[-1])
    else:
        whisker_low, whisker_high = q1, q3

    summary = Summary(
        name="" if name is None else str(name),
        count=int(arr.size),
        minimum=float(arr[0]),
        q1=q1,
        median=median,
        q3=q3,
        maximum=float(arr[-1]),
        iqr=iqr,
        lower_fence=lower_fence,
        upper_fence=upper_fence,
        whisker_low=whisker_low,
        whisker_high=whisker_high,
        lower_outliers=tuple(float(v) for v in arr[lower_mask]),
        upper_outliers=tuple(float(v) for v in arr[upper_mask]),
    )
    if summary.outliers:
        logger.debug(f"Series {summary.name!r}: {len(summary.outliers)} outliers outside "
                     f"[{lower_fence}, {upper_fence}]")
    return summary


def summarize_series(series: Series, *, k: float = DEFAULT_OUTLIER_K) -> Summary:
    """Summarize a Series (name is carried through)."""
    return compute_summary(series.values, name=series.name, k=k)

