"""Convert a ChartDocument to a Plotly figure dict.

Returns a figure dict (never go.Figure) so callers can pass it straight to
a UI widget or serialize it. The figure uses a pixel
coordinate system identical to the document: x in [0, width], y in
[0, height] with the y axis reversed so y grows downward.
"""

from __future__ import annotations

from collections import defaultdict

import plotly.graph_objects as go

from boxplotchart.layout_engine.chart_assembler import ChartDocument
from boxplotchart.layout_engine.primitives import Line, Marker, MarkerStyle, Rect, Role, Text
from boxplotchart.utils.logging import get_logger

logger = get_logger(__name__)

# MarkerStyle -> Plotly marker symbol
PLOTLY_SYMBOLS = {
    MarkerStyle.CIRCLE: "circle-open",
    MarkerStyle.SQUARE: "square-open",
    MarkerStyle.DIAMOND: "diamond-open",
    MarkerStyle.CROSS: "x-thin-open",
}

_LINE_COLORS = {
    Role.GRID_LINE: "#dcdcdc",
}
_LINE_WIDTHS = {
    Role.MEDIAN: 2,
}

_TEXT_X_ANCHOR = {"start": "left", "middle": "center", "end": "right"}


def document_to_plotly(document: ChartDocument) -> dict:
    """Build a Plotly figure dict from the document's primitives.

    Rects and lines become layout shapes, text becomes annotations and
    outlier markers become one scatter trace per series.
    """
    fig = go.Figure()
    shapes: list[dict] = []
    annotations: list[dict] = []
    markers: dict[str, dict[str, list]] = defaultdict(lambda: {"x": [], "y": [], "symbol": [], "size": []})

    for p in document.primitives:
        if isinstance(p, Rect):
            shapes.append(dict(
                type="rect", xref="x", yref="y",
                x0=p.x, y0=p.y, x1=p.x + p.width, y1=p.y + p.height,
                line=dict(color="black", width=1),
            ))
        elif isinstance(p, Line):
            shapes.append(dict(
                type="line", xref="x", yref="y",
                x0=p.x1, y0=p.y1, x1=p.x2, y1=p.y2,
                line=dict(color=_LINE_COLORS.get(p.role, "black"), width=_LINE_WIDTHS.get(p.role, 1)),
                layer="below" if p.role is Role.GRID_LINE else "above",
            ))
        elif isinstance(p, Text):
            annotations.append(dict(
                x=p.x, y=p.y, xref="x", yref="y", text=p.text, showarrow=False,
                xanchor=_TEXT_X_ANCHOR[p.anchor.value], yanchor="middle",
                textangle=p.rotation,
            ))
        elif isinstance(p, Marker):
            m = markers[p.series or ""]
            m["x"].append(p.x)
            m["y"].append(p.y)
            m["symbol"].append(PLOTLY_SYMBOLS[p.style])
            m["size"].append(2 * p.radius)

    for name, m in markers.items():
        fig.add_trace(go.Scatter(
            x=m["x"], y=m["y"], mode="markers", name=name,
            marker=dict(symbol=m["symbol"], size=m["size"], color="black"),
            hoverinfo="name",
        ))

    fig.update_layout(
        width=document.width,
        height=document.height,
        margin=dict(l=0, r=0, t=0, b=0),
        showlegend=False,
        plot_bgcolor="white",
        paper_bgcolor="white",
        shapes=shapes,
        annotations=annotations,
        xaxis=dict(range=[0, document.width], visible=False, fixedrange=True),
        yaxis=dict(range=[document.height, 0], visible=False, fixedrange=True),
    )
    logger.debug(f"document_to_plotly: {len(shapes)} shapes, {len(annotations)} annotations, "
                 f"{len(markers)} marker traces")
    return fig.to_dict()
