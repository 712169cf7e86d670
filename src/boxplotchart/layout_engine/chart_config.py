"""Chart configuration for the box plot layout engine.

ChartConfig is an explicit, immutable value passed to the scale builder and
layout mapper. There are no module-level defaults that callers mutate.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional

from boxplotchart.errors import InvalidLayoutError
from boxplotchart.layout_engine.algorithms.nice_scale import DEFAULT_MAX_TICKS, DEFAULT_MIN_TICKS
from boxplotchart.layout_engine.algorithms.quartile import DEFAULT_OUTLIER_K
from boxplotchart.layout_engine.primitives import MarkerStyle

# Dimensions that must be strictly positive.
_POSITIVE_FIELDS = ("plot_width", "plot_height", "slot_width")

# Dimensions that may be zero but not negative.
_NON_NEGATIVE_FIELDS = (
    "top_margin",
    "bottom_margin",
    "left_margin",
    "right_margin",
    "slot_gap",
    "box_padding",
    "cap_width",
    "outlier_radius",
    "label_offset",
    "tick_label_offset",
)


@dataclass(frozen=True)
class ChartConfig:
    """Layout and scale options for one render.

    All lengths are in drawing units (pixels for SVG output).
    """
    plot_width: float = 400.0          # minimum width of the plot area; grows to fit all slots
    plot_height: float = 300.0         # height of the plot area (H)
    top_margin: float = 40.0           # room above the plot area (title)
    bottom_margin: float = 40.0        # room below the plot area (series labels)
    left_margin: float = 60.0          # room left of the plot area (tick labels, units)
    right_margin: float = 20.0
    slot_width: float = 60.0           # horizontal band reserved per series
    slot_gap: float = 20.0             # gap between slots (and before first / after last)
    box_padding: float = 10.0          # inset of the box from each slot edge
    cap_width: float = 20.0            # length of whisker end caps
    outlier_radius: float = 3.0
    label_offset: float = 16.0         # series label baseline below the plot area
    tick_label_offset: float = 6.0     # gap between tick labels and the Y axis
    min_ticks: int = DEFAULT_MIN_TICKS
    max_ticks: int = DEFAULT_MAX_TICKS
    outlier_k: float = DEFAULT_OUTLIER_K
    outlier_marker: MarkerStyle = MarkerStyle.CIRCLE
    title: Optional[str] = None
    units: Optional[str] = None

    @property
    def box_width(self) -> float:
        return self.slot_width - 2 * self.box_padding

    def validate(self) -> "ChartConfig":
        """Check every dimension and option.

        Returns:
            self, so calls can be chained.

        Raises:
            InvalidLayoutError: On the first field that is out of range.
        """
        for name in _POSITIVE_FIELDS:
            value = getattr(self, name)
            if not _is_number(value) or not math.isfinite(value) or value <= 0:
                raise InvalidLayoutError(name, value)
        for name in _NON_NEGATIVE_FIELDS:
            value = getattr(self, name)
            if not _is_number(value) or not math.isfinite(value) or value < 0:
                raise InvalidLayoutError(name, value, "must be zero or positive")
        if self.box_width <= 0:
            raise InvalidLayoutError(
                "box_padding", self.box_padding,
                f"leaves no room for a box in slot_width={self.slot_width}",
            )
        if not isinstance(self.min_ticks, int) or self.min_ticks < 2:
            raise InvalidLayoutError("min_ticks", self.min_ticks, "must be an integer >= 2")
        if not isinstance(self.max_ticks, int) or self.max_ticks < self.min_ticks:
            raise InvalidLayoutError("max_ticks", self.max_ticks, f"must be an integer >= min_ticks={self.min_ticks}")
        if not _is_number(self.outlier_k) or not math.isfinite(self.outlier_k) or self.outlier_k < 0:
            raise InvalidLayoutError("outlier_k", self.outlier_k, "must be a finite number >= 0")
        if not isinstance(self.outlier_marker, MarkerStyle):
            raise InvalidLayoutError("outlier_marker", self.outlier_marker, "must be a MarkerStyle")
        return self

    def to_dict(self) -> dict[str, Any]:
        """Serialize ChartConfig to a JSON-friendly dictionary."""
        return {
            "plot_width": self.plot_width,
            "plot_height": self.plot_height,
            "top_margin": self.top_margin,
            "bottom_margin": self.bottom_margin,
            "left_margin": self.left_margin,
            "right_margin": self.right_margin,
            "slot_width": self.slot_width,
            "slot_gap": self.slot_gap,
            "box_padding": self.box_padding,
            "cap_width": self.cap_width,
            "outlier_radius": self.outlier_radius,
            "label_offset": self.label_offset,
            "tick_label_offset": self.tick_label_offset,
            "min_ticks": self.min_ticks,
            "max_ticks": self.max_ticks,
            "outlier_k": self.outlier_k,
            "outlier_marker": self.outlier_marker.value,  # Convert enum to string
            "title": self.title,
            "units": self.units,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ChartConfig":
        """Deserialize ChartConfig from a dictionary.

        Missing keys take their defaults. Values are coerced to the field type
        but not range-checked; call validate() for that.

        Raises:
            ValueError: If outlier_marker is not a known MarkerStyle value.
        """
        d = cls()
        return cls(
            plot_width=float(data.get("plot_width", d.plot_width)),
            plot_height=float(data.get("plot_height", d.plot_height)),
            top_margin=float(data.get("top_margin", d.top_margin)),
            bottom_margin=float(data.get("bottom_margin", d.bottom_margin)),
            left_margin=float(data.get("left_margin", d.left_margin)),
            right_margin=float(data.get("right_margin", d.right_margin)),
            slot_width=float(data.get("slot_width", d.slot_width)),
            slot_gap=float(data.get("slot_gap", d.slot_gap)),
            box_padding=float(data.get("box_padding", d.box_padding)),
            cap_width=float(data.get("cap_width", d.cap_width)),
            outlier_radius=float(data.get("outlier_radius", d.outlier_radius)),
            label_offset=float(data.get("label_offset", d.label_offset)),
            tick_label_offset=float(data.get("tick_label_offset", d.tick_label_offset)),
            min_ticks=int(data.get("min_ticks", d.min_ticks)),
            max_ticks=int(data.get("max_ticks", d.max_ticks)),
            outlier_k=float(data.get("outlier_k", d.outlier_k)),
            outlier_marker=MarkerStyle(data.get("outlier_marker", d.outlier_marker.value)),
            title=data.get("title"),  # Can be None
            units=data.get("units"),  # Can be None
        )


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
