"""Drawable primitives emitted by the chart assembler.

Primitives are plain frozen dataclasses in drawing coordinates (y grows
downward). They carry a Role so renderers can style them without inspecting
geometry, and an optional series name for per-series grouping.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class MarkerStyle(Enum):
    """Closed set of outlier marker shapes."""
    CIRCLE = "circle"
    SQUARE = "square"
    DIAMOND = "diamond"
    CROSS = "cross"


class Role(Enum):
    """What a primitive depicts."""
    GRID_LINE = "grid_line"
    TICK_LABEL = "tick_label"
    AXIS_LINE = "axis_line"
    TITLE = "title"
    UNITS_LABEL = "units_label"
    BOX = "box"
    MEDIAN = "median"
    WHISKER = "whisker"
    WHISKER_CAP = "whisker_cap"
    OUTLIER = "outlier"
    SERIES_LABEL = "series_label"


class TextAnchor(Enum):
    START = "start"
    MIDDLE = "middle"
    END = "end"


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    role: Role
    series: Optional[str] = None


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    role: Role
    series: Optional[str] = None


@dataclass(frozen=True)
class Marker:
    x: float
    y: float
    radius: float
    style: MarkerStyle
    role: Role = Role.OUTLIER
    series: Optional[str] = None


@dataclass(frozen=True)
class Text:
    x: float
    y: float
    text: str
    role: Role
    anchor: TextAnchor = TextAnchor.MIDDLE
    rotation: float = 0.0  # degrees, clockwise about (x, y)
    series: Optional[str] = None


Primitive = Union[Rect, Line, Marker, Text]
