"""Grouped bar chart with a colour legend."""

from __future__ import annotations

from typing import Sequence

import pandas as pd

from socialcharts.charts.base import Chart, ChartLayout, Margin, axis_titles, bottom_axis, left_axis
from socialcharts.pipeline.aggregate import average_likes
from socialcharts.pipeline.normalize import normalize, require_columns
from socialcharts.scales import BandScale, LinearScale, OrdinalScale, unique
from socialcharts.scene import Rect, Scene, Text

DEFAULT_COLORS = ("#1f77b4", "#ff7f0e", "#2ca02c")
HEADROOM = 1.1
LEGEND_SWATCH = 15.0
LEGEND_ROW = 20.0


class BarPlot(Chart):
    """Average likes per platform, one bar per post type."""

    name = "barplot"
    source_file = "socialMediaAvg.csv"
    default_margin = Margin(top=30, bottom=40, left=50, right=100)

    def __init__(
        self,
        layout: ChartLayout | None = None,
        *,
        group_col: str = "Platform",
        series_col: str = "PostType",
        value_col: str = "Likes",
        colors: Sequence[str] = DEFAULT_COLORS,
        group_padding: float = 0.2,
        bar_padding: float = 0.05,
    ) -> None:
        super().__init__(layout)
        self.group_col = group_col
        self.series_col = series_col
        self.value_col = value_col
        self.colors = tuple(colors)
        self.group_padding = group_padding
        self.bar_padding = bar_padding

    def prepare(self, df: pd.DataFrame) -> pd.DataFrame:
        prepared = normalize(df, value_col=self.value_col)
        require_columns(prepared, [self.group_col, self.series_col])
        return prepared

    def prepare_from_posts(self, df: pd.DataFrame) -> pd.DataFrame:
        """Average raw per-post rows into one row per platform and post type."""

        posts = self.prepare(df)
        return average_likes(posts, by=(self.group_col, self.series_col), value=self.value_col)

    def build(self, df: pd.DataFrame) -> Scene:
        self._require_rows(df)
        layout = self.layout
        groups = unique(df[self.group_col].astype(str))
        series = unique(df[self.series_col].astype(str))

        x0 = BandScale.padded(groups, (layout.plot_left, layout.plot_right), self.group_padding)
        x1 = BandScale.padded(series, (0.0, x0.bandwidth), self.bar_padding)
        y_scale = LinearScale(
            (0.0, float(df[self.value_col].max()) * HEADROOM),
            (layout.plot_bottom, layout.plot_top),
        )
        color = OrdinalScale(series, self.colors)

        scene = layout.new_scene()
        scene.extend(left_axis(y_scale, layout.plot_left))
        scene.extend(bottom_axis(x0, layout.plot_bottom))
        scene.extend(axis_titles(layout, self.group_col, self.value_col))

        for group, kind, value in zip(
            df[self.group_col].astype(str), df[self.series_col].astype(str), df[self.value_col]
        ):
            y = y_scale(float(value))
            scene.add(
                Rect(
                    x0(group) + x1(kind),
                    y,
                    x1.bandwidth,
                    layout.plot_bottom - y,
                    fill=color(kind),
                )
            )

        scene.extend(self._legend(series, color))
        return scene

    def _legend(self, series: Sequence[str], color: OrdinalScale) -> list:
        left = self.layout.width - 150
        top = self.layout.margin.top
        commands: list = []
        for i, kind in enumerate(series):
            row_y = top + i * LEGEND_ROW
            commands.append(Rect(left + 70, row_y, LEGEND_SWATCH, LEGEND_SWATCH, fill=color(kind)))
            commands.append(
                Text(left + 90, row_y + LEGEND_SWATCH / 2, kind, baseline="middle")
            )
        return commands
