"""
Scale builder: shared Y-axis range and "nice" ticks for all series.

Steps are drawn from {1, 2, 5} x 10^n. nice_range() is a pure function of
(lo, hi, tick band) and can be tested without any drawing context.

Tick values are computed as integer multiples of the step and divided by a
power of ten (never multiplied by a fractional step), so 0.1-steps give 0.3
rather than 0.30000000000000004.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence

from boxplotchart.errors import NoDataError, ScaleRangeError
from boxplotchart.layout_engine.algorithms.quartile import Summary
from boxplotchart.utils.logging import get_logger

logger = get_logger(__name__)

NICE_MANTISSAS = (1, 2, 5)

DEFAULT_MIN_TICKS = 4
DEFAULT_MAX_TICKS = 10

# Degenerate (zero-height) ranges are widened by max(1, 5% of |value|) on each side.
DEGENERATE_MIN_PAD = 1.0
DEGENERATE_PAD_FRACTION = 0.05


@dataclass(frozen=True)
class NiceStep:
    """A step of the form mantissa x 10^exponent, mantissa in {1, 2, 5}."""
    mantissa: int
    exponent: int

    @property
    def value(self) -> float:
        return self.tick(1)

    @property
    def decimals(self) -> int:
        """Digits after the decimal point needed to print any multiple of this step."""
        return max(0, -self.exponent)

    def tick(self, k: int) -> float:
        """The k-th multiple of this step."""
        if self.exponent >= 0:
            return float(k * self.mantissa * 10 ** self.exponent)
        return (k * self.mantissa) / 10 ** (-self.exponent)


@dataclass(frozen=True)
class NiceRange:
    """Result of nice_range(): [lo, hi] rounded outward to multiples of step."""
    lo: float
    hi: float
    nice_step: NiceStep
    k_lo: int
    k_hi: int

    @property
    def step(self) -> float:
        return self.nice_step.value

    @property
    def tick_count(self) -> int:
        return self.k_hi - self.k_lo + 1

    @property
    def ticks(self) -> tuple[float, ...]:
        return tuple(self.nice_step.tick(k) for k in range(self.k_lo, self.k_hi + 1))


@dataclass(frozen=True)
class AxisScale:
    """Shared numeric axis: range, step and ordered ticks.

    data_min / data_max record the unrounded extremes the scale was built from.
    """
    lo: float
    hi: float
    step: float
    ticks: tuple[float, ...]
    decimals: int
    data_min: float
    data_max: float

    @property
    def span(self) -> float:
        return self.hi - self.lo

    def contains(self, value: float) -> bool:
        return self.lo <= value <= self.hi

    def format_tick(self, value: float) -> str:
        return f"{value:.{self.decimals}f}"

    def tick_labels(self) -> list[str]:
        return [self.format_tick(t) for t in self.ticks]


def _candidate_steps(span: float, max_ticks: int) -> Iterator[NiceStep]:
    """Nice steps in ascending order, from far too fine to wider than the span."""
    first = math.floor(math.log10(span / max_ticks)) - 1
    last = math.floor(math.log10(span)) + 1
    for exponent in range(first, last + 1):
        for mantissa in NICE_MANTISSAS:
            yield NiceStep(mantissa, exponent)


def _outer_multiples(lo: float, hi: float, step: NiceStep) -> tuple[int, int]:
    """Largest k_lo with tick(k_lo) <= lo and smallest k_hi with tick(k_hi) >= hi."""
    k_lo = math.floor(lo / step.value)
    while step.tick(k_lo) > lo:
        k_lo -= 1
    while step.tick(k_lo + 1) <= lo:
        k_lo += 1

    k_hi = math.ceil(hi / step.value)
    while step.tick(k_hi) < hi:
        k_hi += 1
    while step.tick(k_hi - 1) >= hi:
        k_hi -= 1
    return k_lo, k_hi


def nice_range(
    lo: float,
    hi: float,
    min_ticks: int = DEFAULT_MIN_TICKS,
    max_ticks: int = DEFAULT_MAX_TICKS,
) -> NiceRange:
    """Round [lo, hi] outward to nice boundaries.

    Picks the smallest step from {1, 2, 5} x 10^n whose tick count over
    [floor(lo/step)*step, ceil(hi/step)*step] lies within [min_ticks, max_ticks].
    If the band cannot be met, the smallest step with at most max_ticks ticks is
    used and a warning is logged.

    Args:
        lo: Lower data bound (finite).
        hi: Upper data bound (finite, strictly greater than lo).
        min_ticks: Minimum number of ticks (>= 2).
        max_ticks: Maximum number of ticks (>= min_ticks).

    Returns:
        NiceRange with the rounded bounds and chosen step.

    Raises:
        ValueError: If the bounds or tick band are invalid.
        ScaleRangeError: If hi - lo, or the rounded range, overflows a float.
    """
    if not (math.isfinite(lo) and math.isfinite(hi)):
        raise ValueError(f"nice_range bounds must be finite, got lo={lo}, hi={hi}")
    if hi <= lo:
        raise ValueError(f"nice_range requires hi > lo, got lo={lo}, hi={hi}")
    if min_ticks < 2 or max_ticks < min_ticks:
        raise ValueError(f"Invalid tick band [{min_ticks}, {max_ticks}]")

    span = hi - lo
    if not math.isfinite(span):
        raise ScaleRangeError(lo, hi)

    fallback = None
    candidate = None
    for step in _candidate_steps(span, max_ticks):
        try:
            k_lo, k_hi = _outer_multiples(lo, hi, step)
            candidate = NiceRange(lo=step.tick(k_lo), hi=step.tick(k_hi), nice_step=step, k_lo=k_lo, k_hi=k_hi)
        except OverflowError as e:
            raise ScaleRangeError(lo, hi) from e
        if not math.isfinite(candidate.hi - candidate.lo):
            raise ScaleRangeError(lo, hi)
        count = candidate.tick_count
        if count > max_ticks:
            continue
        if count >= min_ticks:
            return candidate
        if fallback is None:
            fallback = candidate

    if fallback is None:
        # Even the widest step overshoots max_ticks (e.g. a band of [2, 2] around zero).
        fallback = candidate

    logger.warning(
        f"No nice step gives {min_ticks}-{max_ticks} ticks for [{lo}, {hi}]; "
        f"using {fallback.tick_count} ticks"
    )
    return fallback


def expand_degenerate(value: float) -> tuple[float, float]:
    """Widen a zero-height range around value so the axis keeps a non-zero height."""
    pad = max(DEGENERATE_MIN_PAD, abs(value) * DEGENERATE_PAD_FRACTION)
    return value - pad, value + pad


def data_extent(summaries: Sequence[Summary]) -> tuple[float, float]:
    """Global (min, max) over all summaries, outliers included."""
    if not summaries:
        raise NoDataError()
    lo = min(min(s.minimum, s.min_value) for s in summaries)
    hi = max(max(s.maximum, s.max_value) for s in summaries)
    return lo, hi


def build_axis_scale(
    summaries: Sequence[Summary],
    *,
    min_ticks: int = DEFAULT_MIN_TICKS,
    max_ticks: int = DEFAULT_MAX_TICKS,
) -> AxisScale:
    """Build one AxisScale shared by every series.

    Raises:
        NoDataError: If summaries is empty.
        ScaleRangeError: If the data range is too wide for a finite axis.
    """
    data_min, data_max = data_extent(summaries)

    lo, hi = data_min, data_max
    if lo == hi:
        lo, hi = expand_degenerate(lo)
        if not (math.isfinite(lo) and math.isfinite(hi)):
            raise ScaleRangeError(data_min, data_max)
        logger.debug(f"Degenerate range at {data_min}; expanded to [{lo}, {hi}]")

    rng = nice_range(lo, hi, min_ticks=min_ticks, max_ticks=max_ticks)
    scale = AxisScale(
        lo=rng.lo,
        hi=rng.hi,
        step=rng.step,
        ticks=rng.ticks,
        decimals=rng.nice_step.decimals,
        data_min=data_min,
        data_max=data_max,
    )
    logger.info(
        f"Axis scale: data=[{data_min}, {data_max}] -> [{scale.lo}, {scale.hi}] "
        f"step={scale.step} ticks={len(scale.ticks)}"
    )
    return scale
