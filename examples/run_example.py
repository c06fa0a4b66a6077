"""Example runner that wires together the socialcharts modules."""

from __future__ import annotations

from pathlib import Path

from socialcharts.charts import BoxPlot
from socialcharts.render import render_scene
from socialcharts.sources import LocalCsvSource


def run_example() -> None:
    """
    Summarize the bundled posts file and render its boxplot as SVG.
    """

    data_dir = Path(__file__).resolve().parents[1] / "data"
    chart = BoxPlot()
    df = chart.prepare(LocalCsvSource(data_dir).read(chart.source_file))
    for platform, stats in chart.summaries(df).items():
        print(platform, stats)
    render_scene(chart.build(df), Path("charts_output/boxplot_example.svg"))


if __name__ == "__main__":
    run_example()
