"""Serialize a ChartDocument to SVG text.

One element per primitive, in document order. Styling is a fixed set of
classes keyed by primitive Role.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union
from xml.sax.saxutils import escape, quoteattr

from boxplotchart.layout_engine.chart_assembler import ChartDocument
from boxplotchart.layout_engine.primitives import Line, Marker, MarkerStyle, Primitive, Rect, Text
from boxplotchart.utils.logging import get_logger

logger = get_logger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"

STYLES = (
    ".grid_line { stroke: rgb(220,220,220); stroke-width: 1; }",
    ".axis_line { stroke: rgb(0,0,0); stroke-width: 1; }",
    ".box { fill: none; stroke: rgb(0,0,0); stroke-width: 1; }",
    ".median { stroke: rgb(0,0,0); stroke-width: 2; }",
    ".whisker, .whisker_cap { stroke: rgb(0,0,0); stroke-width: 1; }",
    ".outlier { fill: none; stroke: rgb(0,0,0); stroke-width: 1; }",
    "text { font-family: sans-serif; font-size: 12px; fill: rgb(0,0,0); }",
    ".tick_label { dominant-baseline: middle; }",
    ".title { font-size: 16px; }",
)


def _num(v: float) -> str:
    """Compact number: at most 3 decimals, no trailing zeros."""
    s = f"{v:.3f}".rstrip("0").rstrip(".")
    return "0" if s in ("-0", "") else s


def _marker_element(m: Marker, cls: str) -> str:
    x, y, r = m.x, m.y, m.radius
    if m.style is MarkerStyle.CIRCLE:
        return f'<circle class={cls} cx="{_num(x)}" cy="{_num(y)}" r="{_num(r)}"/>'
    if m.style is MarkerStyle.SQUARE:
        return (f'<rect class={cls} x="{_num(x - r)}" y="{_num(y - r)}" '
                f'width="{_num(2 * r)}" height="{_num(2 * r)}"/>')
    if m.style is MarkerStyle.DIAMOND:
        pts = f"{_num(x)},{_num(y - r)} {_num(x + r)},{_num(y)} {_num(x)},{_num(y + r)} {_num(x - r)},{_num(y)}"
        return f'<polygon class={cls} points="{pts}"/>'
    # CROSS
    d = (f"M {_num(x - r)} {_num(y - r)} L {_num(x + r)} {_num(y + r)} "
         f"M {_num(x - r)} {_num(y + r)} L {_num(x + r)} {_num(y - r)}")
    return f'<path class={cls} d="{d}"/>'


def primitive_to_svg(p: Primitive) -> str:
    """SVG element for one primitive."""
    cls = quoteattr(p.role.value)
    if isinstance(p, Rect):
        return (f'<rect class={cls} x="{_num(p.x)}" y="{_num(p.y)}" '
                f'width="{_num(p.width)}" height="{_num(p.height)}"/>')
    if isinstance(p, Line):
        return (f'<line class={cls} x1="{_num(p.x1)}" y1="{_num(p.y1)}" '
                f'x2="{_num(p.x2)}" y2="{_num(p.y2)}"/>')
    if isinstance(p, Marker):
        return _marker_element(p, cls)
    if isinstance(p, Text):
        transform = ""
        if p.rotation:
            transform = f' transform="rotate({_num(p.rotation)} {_num(p.x)} {_num(p.y)})"'
        return (f'<text class={cls} x="{_num(p.x)}" y="{_num(p.y)}" '
                f'text-anchor="{p.anchor.value}"{transform}>{escape(p.text)}</text>')
    raise TypeError(f"Unknown primitive type: {type(p).__name__}")


def render_svg(document: ChartDocument) -> str:
    """Render a ChartDocument as a standalone SVG string."""
    w, h = _num(document.width), _num(document.height)
    parts = [
        f'<svg xmlns="{SVG_NS}" width="{w}" height="{h}" viewBox="0 0 {w} {h}" '
        f'style="background-color: white;">',
        "<style>" + " ".join(STYLES) + "</style>",
    ]
    parts.extend(primitive_to_svg(p) for p in document.primitives)
    parts.append("</svg>")
    return "\n".join(parts) + "\n"


def write_svg(document: ChartDocument, path: Union[str, Path]) -> Path:
    """Render and write SVG to path. Returns the path written."""
    path = Path(path)
    path.write_text(render_svg(document), encoding="utf-8")
    logger.info(f"Wrote SVG chart ({len(document.primitives)} primitives) to {path}")
    return path
