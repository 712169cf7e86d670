"""Render a small box plot to SVG and print the summary report.

Run from the repo root:
    python examples/example_box_plot.py [output.svg]
"""

import sys

import numpy as np
import pandas as pd

from boxplotchart import ChartConfig, MarkerStyle, build_chart, render_svg
from boxplotchart.layout_engine.pipeline import compute_summaries, summary_report
from boxplotchart.layout_engine.series_loader import series_from_dataframe
from boxplotchart.utils.logging import configure_logging

configure_logging(level="INFO")

rng = np.random.default_rng(7)
df = pd.DataFrame({
    "condition": np.repeat(["control", "low dose", "high dose"], 40),
    "response_ms": np.concatenate([
        rng.normal(120, 15, 40),
        rng.normal(105, 20, 40),
        np.append(rng.normal(90, 10, 38), [160.0, 12.0]),
    ]),
})

series = series_from_dataframe(df, "condition", "response_ms")
config = ChartConfig(title="Response time by condition", units="ms", outlier_marker=MarkerStyle.DIAMOND)

document = build_chart(series, config)
print(summary_report(compute_summaries(series, k=config.outlier_k), document.scale))

out_path = sys.argv[1] if len(sys.argv) > 1 else "box_plot.svg"
with open(out_path, "w", encoding="utf-8") as f:
    f.write(render_svg(document))
print(f"Wrote {out_path}")
