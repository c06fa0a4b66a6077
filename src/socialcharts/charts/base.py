"""Shared layout, axes, and the abstract chart interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Callable

import pandas as pd

from socialcharts.config import DEFAULT_BACKGROUND, DEFAULT_HEIGHT, DEFAULT_WIDTH
from socialcharts.scales import BandScale, LinearScale
from socialcharts.scene import Line, Path, Scene, Text

TICK_SIZE = 6.0
TICK_PADDING = 3.0
TICK_FONT_SIZE = 10.0
LABEL_FONT_SIZE = 12.0


@dataclass(frozen=True)
class Margin:
    top: float = 30.0
    bottom: float = 40.0
    left: float = 50.0
    right: float = 30.0


@dataclass(frozen=True)
class ChartLayout:
    """Canvas size, margins and background for one chart."""

    width: float = DEFAULT_WIDTH
    height: float = DEFAULT_HEIGHT
    margin: Margin = field(default_factory=Margin)
    background: str | None = DEFAULT_BACKGROUND

    @property
    def plot_left(self) -> float:
        return self.margin.left

    @property
    def plot_right(self) -> float:
        return self.width - self.margin.right

    @property
    def plot_top(self) -> float:
        return self.margin.top

    @property
    def plot_bottom(self) -> float:
        return self.height - self.margin.bottom

    def with_margin(self, **kwargs: float) -> "ChartLayout":
        return replace(self, margin=replace(self.margin, **kwargs))

    def new_scene(self) -> Scene:
        return Scene(width=self.width, height=self.height, background=self.background)


def left_axis(scale: LinearScale, x: float, *, tick_count: int = 10) -> list:
    """Draw commands for a vertical value axis at ``x``."""

    r0, r1 = scale.range
    commands: list = [
        Path(
            segments=(
                ("M", x - TICK_SIZE, r0),
                ("L", x, r0),
                ("L", x, r1),
                ("L", x - TICK_SIZE, r1),
            ),
        )
    ]
    fmt = scale.tick_format(tick_count)
    for value in scale.ticks(tick_count):
        y = scale(value)
        commands.append(Line(x - TICK_SIZE, y, x, y))
        commands.append(
            Text(
                x - TICK_SIZE - TICK_PADDING,
                y,
                fmt(value),
                anchor="end",
                baseline="middle",
                font_size=TICK_FONT_SIZE,
            )
        )
    return commands


def bottom_axis(
    scale: BandScale,
    y: float,
    *,
    label: Callable[[object], str] = str,
    rotate: float = 0.0,
) -> list:
    """
    Draw commands for a horizontal category axis at ``y``.

    Rotated labels are end-anchored so they hang off the tick.
    """

    r0, r1 = scale.range
    commands: list = [
        Path(
            segments=(
                ("M", r0, y + TICK_SIZE),
                ("L", r0, y),
                ("L", r1, y),
                ("L", r1, y + TICK_SIZE),
            ),
        )
    ]
    anchor = "end" if rotate else "middle"
    for key in scale.domain:
        x = scale.center(key)
        commands.append(Line(x, y, x, y + TICK_SIZE))
        commands.append(
            Text(
                x,
                y + TICK_SIZE + TICK_PADDING,
                label(key),
                anchor=anchor,
                baseline="hanging",
                rotate=rotate,
                font_size=TICK_FONT_SIZE,
            )
        )
    return commands


def axis_titles(layout: ChartLayout, x_title: str, y_title: str, *, y_offset: float = 15.0) -> list:
    return [
        Text(layout.width / 2, layout.height - 5, x_title, anchor="middle", font_size=LABEL_FONT_SIZE),
        Text(
            y_offset,
            layout.height / 2,
            y_title,
            anchor="middle",
            rotate=-90.0,
            font_size=LABEL_FONT_SIZE,
        ),
    ]


class Chart(ABC):
    """Turns a prepared frame into a :class:`Scene`."""

    name: str
    source_file: str
    default_margin: Margin = Margin()

    def __init__(self, layout: ChartLayout | None = None) -> None:
        base = layout or ChartLayout()
        if layout is None:
            base = replace(base, margin=self.default_margin)
        self.layout = base

    @abstractmethod
    def prepare(self, df: pd.DataFrame) -> pd.DataFrame:
        """Coerce and aggregate a raw frame into chart-ready rows."""

    @abstractmethod
    def build(self, df: pd.DataFrame) -> Scene:
        """Compute the scene for already prepared rows."""

    def describe(self, df: pd.DataFrame) -> dict[str, object]:
        """Extra JSON-friendly details about the chart data."""

        return {"rows": len(df)}

    def _require_rows(self, df: pd.DataFrame) -> None:
        if df.empty:
            raise ValueError(f"No data provided for the {self.name} chart.")
