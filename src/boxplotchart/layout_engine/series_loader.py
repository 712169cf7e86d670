"""Build Series from in-memory data (mappings and pandas DataFrames).

Nothing here reads files: callers parse their source format and hand the
result over as a mapping or a DataFrame.
"""

from __future__ import annotations

from typing import Mapping, Optional, Sequence

import pandas as pd

from boxplotchart.errors import InvalidSeriesError, NoDataError
from boxplotchart.layout_engine.algorithms.quartile import Series
from boxplotchart.utils.logging import get_logger

logger = get_logger(__name__)

_NUMERIC_KINDS = {"i", "u", "f"}  # int, unsigned, float (pandas dtype.kind)


def series_from_mapping(data: Mapping[str, Sequence[float]]) -> list[Series]:
    """Convert {name: values} to a list of Series, keeping mapping order.

    Raises:
        NoDataError: If data is empty.
        InvalidSeriesError: If a value cannot be converted to float.
    """
    if not data:
        raise NoDataError()
    out: list[Series] = []
    for name, values in data.items():
        try:
            out.append(Series.of(name, values))
        except (TypeError, ValueError) as e:
            raise InvalidSeriesError(str(name), f"non-numeric value ({e})") from e
    return out


def series_from_dataframe(
    df: pd.DataFrame,
    group_col: str,
    value_col: str,
) -> list[Series]:
    """Build one Series per group from a long-form DataFrame.

    Values are converted with pd.to_numeric (errors coerced to NaN) and NaN
    rows are dropped, so each series holds only plottable values. Groups keep
    their order of first appearance.

    Args:
        df: Long-form data, one row per observation.
        group_col: Column whose (string) value names the series.
        value_col: Numeric column holding the observation.

    Raises:
        ValueError: If a column is missing.
        NoDataError: If no numeric rows remain.
    """
    missing = [c for c in (group_col, value_col) if c not in df.columns]
    if missing:
        raise ValueError(f"Columns not found in dataframe: {missing}")

    tmp = pd.DataFrame({
        "g": df[group_col],
        "y": pd.to_numeric(df[value_col], errors="coerce"),
    }).dropna(subset=["g", "y"])
    dropped = len(df) - len(tmp)
    if dropped:
        logger.debug(f"series_from_dataframe: dropped {dropped} rows with missing group or non-numeric value")
    if len(tmp) == 0:
        raise NoDataError(f"No numeric values in column {value_col!r}")

    tmp["g"] = tmp["g"].astype(str)
    return [Series.of(str(key), sub["y"].tolist()) for key, sub in tmp.groupby("g", sort=False)]


def series_from_wide_dataframe(
    df: pd.DataFrame,
    columns: Optional[Sequence[str]] = None,
) -> list[Series]:
    """Build one Series per column from a wide DataFrame.

    Args:
        df: Wide data, one column per series (ragged columns padded with NaN).
        columns: Columns to use, in order. Defaults to every numeric column.

    Raises:
        ValueError: If a requested column is missing.
        NoDataError: If there are no columns to use.
        InvalidSeriesError: If a column has no numeric values.
    """
    if columns is None:
        columns = [str(c) for c in df.columns if getattr(df[c].dtype, "kind", None) in _NUMERIC_KINDS]
    else:
        missing = [c for c in columns if c not in df.columns]
        if missing:
            raise ValueError(f"Columns not found in dataframe: {missing}")
    if not columns:
        raise NoDataError("No numeric columns in dataframe")

    out: list[Series] = []
    for col in columns:
        values = pd.to_numeric(df[col], errors="coerce").dropna()
        if len(values) == 0:
            raise InvalidSeriesError(col, "column has no numeric values")
        out.append(Series.of(col, values.tolist()))
    return out
