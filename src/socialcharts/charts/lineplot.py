"""Time-series line chart over categorical dates."""

from __future__ import annotations

import pandas as pd

from socialcharts.charts.base import Chart, ChartLayout, Margin, axis_titles, bottom_axis, left_axis
from socialcharts.charts.curves import linear_curve, natural_curve
from socialcharts.pipeline.aggregate import likes_over_time
from socialcharts.pipeline.normalize import normalize, require_columns
from socialcharts.scales import BandScale, LinearScale, unique
from socialcharts.scene import Path, Scene

CURVES = {"natural": natural_curve, "linear": linear_curve}


class LinePlot(Chart):
    """Likes per date drawn through the centre of each date band."""

    name = "lineplot"
    source_file = "socialMediaTime.csv"
    default_margin = Margin(top=30, bottom=70, left=50, right=100)

    def __init__(
        self,
        layout: ChartLayout | None = None,
        *,
        date_col: str = "Date",
        value_col: str = "Likes",
        curve: str = "natural",
        color: str = "blue",
        label_rotation: float = -25.0,
    ) -> None:
        super().__init__(layout)
        if curve not in CURVES:
            raise ValueError(f"Unsupported curve: {curve}")
        self.date_col = date_col
        self.value_col = value_col
        self.curve = curve
        self.color = color
        self.label_rotation = label_rotation

    def prepare(self, df: pd.DataFrame) -> pd.DataFrame:
        prepared = normalize(df, value_col=self.value_col)
        require_columns(prepared, [self.date_col])
        return prepared

    def prepare_from_posts(self, df: pd.DataFrame) -> pd.DataFrame:
        """Average raw per-post rows into one row per date."""

        return likes_over_time(self.prepare(df), date_col=self.date_col, value=self.value_col)

    def build(self, df: pd.DataFrame) -> Scene:
        self._require_rows(df)
        layout = self.layout
        dates = df[self.date_col].astype(str)
        values = df[self.value_col].astype(float)
        x_scale = BandScale(unique(dates), (layout.plot_left, layout.plot_right))
        y_scale = LinearScale(
            (float(values.min()), float(values.max())),
            (layout.plot_bottom, layout.plot_top),
        )

        scene = layout.new_scene()
        scene.extend(left_axis(y_scale, layout.plot_left))
        scene.extend(bottom_axis(x_scale, layout.plot_bottom, rotate=self.label_rotation))
        scene.extend(axis_titles(layout, self.date_col, self.value_col))

        xs = [x_scale.center(date) for date in dates]
        ys = [y_scale(value) for value in values]
        scene.add(
            Path(
                segments=CURVES[self.curve](xs, ys),
                stroke=self.color,
                stroke_width=2.0,
                fill=None,
            )
        )
        return scene
