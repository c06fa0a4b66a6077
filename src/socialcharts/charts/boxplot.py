"""Side-by-side boxplot of values per group."""

from __future__ import annotations

import pandas as pd

from socialcharts.charts.base import Chart, ChartLayout, Margin, axis_titles, bottom_axis, left_axis
from socialcharts.pipeline.normalize import normalize, require_columns
from socialcharts.pipeline.summary import Summary, summaries_to_dict, summarize_frame
from socialcharts.scales import BandScale, LinearScale, unique
from socialcharts.scene import Line, Rect, Scene


class BoxPlot(Chart):
    """Five-number summary boxes for every platform."""

    name = "boxplot"
    source_file = "socialMedia.csv"
    default_margin = Margin(top=30, bottom=40, left=50, right=30)

    def __init__(
        self,
        layout: ChartLayout | None = None,
        *,
        group_col: str = "Platform",
        value_col: str = "Likes",
        box_fill: str = "lightblue",
        median_color: str = "red",
    ) -> None:
        super().__init__(layout)
        self.group_col = group_col
        self.value_col = value_col
        self.box_fill = box_fill
        self.median_color = median_color

    def prepare(self, df: pd.DataFrame) -> pd.DataFrame:
        prepared = normalize(df, value_col=self.value_col)
        require_columns(prepared, [self.group_col])
        return prepared

    def summaries(self, df: pd.DataFrame) -> dict[str, Summary]:
        return summarize_frame(df, self.group_col, self.value_col)

    def describe(self, df: pd.DataFrame) -> dict[str, object]:
        details = super().describe(df)
        details["summaries"] = summaries_to_dict(self.summaries(df))
        return details

    def build(self, df: pd.DataFrame) -> Scene:
        self._require_rows(df)
        layout = self.layout
        values = df[self.value_col]
        x_scale = BandScale(
            unique(df[self.group_col].astype(str)),
            (layout.plot_left, layout.plot_right),
        )
        y_scale = LinearScale(
            (float(values.min()), float(values.max())),
            (layout.plot_bottom, layout.plot_top),
        )

        scene = layout.new_scene()
        scene.extend(left_axis(y_scale, layout.plot_left))
        scene.extend(bottom_axis(x_scale, layout.plot_bottom))
        scene.extend(axis_titles(layout, self.group_col, self.value_col, y_offset=20.0))

        box_width = x_scale.bandwidth
        for group, stats in self.summaries(df).items():
            x = x_scale(group)
            center = x + box_width / 2
            scene.add(Line(center, y_scale(stats.min), center, y_scale(stats.q1)))
            scene.add(Line(center, y_scale(stats.q3), center, y_scale(stats.max)))
            scene.add(
                Rect(
                    x,
                    y_scale(stats.q3),
                    box_width,
                    y_scale(stats.q1) - y_scale(stats.q3),
                    fill=self.box_fill,
                    stroke="black",
                )
            )
            median_y = y_scale(stats.median)
            scene.add(
                Line(x, median_y, x + box_width, median_y, stroke=self.median_color, stroke_width=2.0)
            )
        return scene
