"""Chart builders that turn prepared frames into scenes."""

from __future__ import annotations

from .barplot import BarPlot
from .base import Chart, ChartLayout, Margin
from .boxplot import BoxPlot
from .lineplot import LinePlot

__all__ = ["BarPlot", "BoxPlot", "Chart", "ChartLayout", "LinePlot", "Margin"]
