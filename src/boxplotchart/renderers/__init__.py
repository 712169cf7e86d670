"""Renderers that consume a ChartDocument."""

from boxplotchart.renderers.plotly_renderer import document_to_plotly
from boxplotchart.renderers.svg_renderer import render_svg, write_svg

__all__ = [
    "document_to_plotly",
    "render_svg",
    "write_svg",
]
