"""Orchestrate loading, preparation, scene building, and rendering."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone
from dataclasses import replace
from pathlib import Path
import json
from typing import Callable, Mapping
import logging

import pandas as pd

from socialcharts.charts import BarPlot, BoxPlot, Chart, ChartLayout, LinePlot
from socialcharts.config import (
    OUTPUT_FORMATS,
    get_charts as get_default_charts,
    get_data_dir,
    get_output_dir,
    get_output_format,
)
from socialcharts.render import render_scene
from socialcharts.scene import Scene
from socialcharts.sources import DataSource, RoutedSource
from socialcharts.ui.frontend import summarize_scene

CHART_CLASSES: dict[str, type[Chart]] = {
    "boxplot": BoxPlot,
    "barplot": BarPlot,
    "lineplot": LinePlot,
}

POSTS_FILE = BoxPlot.source_file
LATEST_NAME = "charts_latest.json"
STATUS_NAME = "charts_status.json"
LOGGER = logging.getLogger("socialcharts.runner")

Renderer = Callable[[Scene, Path], object]


def _default_renderer(scene: Scene, out_path: Path) -> None:
    render_scene(scene, out_path)


class ChartRunner:
    """Execute a full load → prepare → build → render workflow."""

    def __init__(
        self,
        *,
        charts: Sequence[str] | None = None,
        data_dir: Path | str | None = None,
        output_dir: Path | str | None = None,
        output_format: str | None = None,
        sources: Mapping[str, str] | None = None,
        layout: ChartLayout | None = None,
        source: DataSource | None = None,
        renderer: Renderer | None = None,
    ) -> None:
        self.charts = [name.lower() for name in (charts or get_default_charts(CHART_CLASSES.keys()))]
        self.data_dir = Path(data_dir or get_data_dir())
        self.output_dir = Path(output_dir or get_output_dir())
        self.output_format = (output_format or get_output_format()).lower()
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(f"Unsupported output format: {self.output_format}")
        self.sources = dict(sources or {})
        self.layout = layout
        self.source = source or RoutedSource(self.data_dir)
        self.renderer = renderer or _default_renderer

    def _make_chart(self, name: str) -> Chart:
        chart_cls = CHART_CLASSES.get(name)
        if chart_cls is None:
            raise ValueError(f"Unsupported chart: {name}")
        if self.layout is None:
            return chart_cls()
        return chart_cls(replace(self.layout, margin=chart_cls.default_margin))

    def _location(self, chart: Chart) -> str:
        return self.sources.get(chart.name, chart.source_file)

    def load_chart_data(self, chart: Chart) -> pd.DataFrame:
        """
        Load rows for ``chart``, deriving averages from the posts file if needed.
        """

        location = self._location(chart)
        derive = getattr(chart, "prepare_from_posts", None)
        if derive is not None and not self.source.exists(location):
            posts_location = self.sources.get("posts", POSTS_FILE)
            LOGGER.info("%s not found; deriving %s data from %s", location, chart.name, posts_location)
            return derive(self.source.read(posts_location))
        return chart.prepare(self.source.read(location))

    def run(self) -> Mapping[str, object]:
        """Render every configured chart and write the JSON side files."""

        status: dict[str, object] = {
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "format": self.output_format,
            "charts": {},
        }
        latest: dict[str, object] = {}
        outputs: dict[str, object] = {}
        for name in self.charts:
            chart = self._make_chart(name)
            try:
                df = self.load_chart_data(chart)
                scene = chart.build(df)
                out_path = self.output_dir / f"{name}.{self.output_format}"
                self.renderer(scene, out_path)
            except Exception as exc:
                LOGGER.warning("Chart %s failed: %s", name, exc)
                status["charts"][name] = {"ok": False, "error": str(exc)}
                continue
            outputs[name] = out_path
            latest[name] = {
                "file": out_path.name,
                "source": self._location(chart),
                **chart.describe(df),
                "scene": scene.to_dict(),
            }
            status["charts"][name] = {
                "ok": True,
                "file": out_path.name,
                "rows": len(df),
                "scene": summarize_scene(scene),
            }

        if not outputs:
            self._write_status(status, success=False, detail="No charts were produced.")
            raise RuntimeError("No charts were produced.")

        self.output_dir.mkdir(parents=True, exist_ok=True)
        json_path = self.output_dir / LATEST_NAME
        with json_path.open("w", encoding="utf-8") as handle:
            json.dump(latest, handle, indent=2)
        self._write_status(status, success=len(outputs) == len(self.charts), detail=None)
        return {"json": json_path, "charts": outputs}

    def prepare_files(self) -> Mapping[str, Path]:
        """Write the averaged bar and line chart inputs next to the posts file."""

        posts = self.source.read(self.sources.get("posts", POSTS_FILE))
        written: dict[str, Path] = {}
        for chart in (self._make_chart(BarPlot.name), self._make_chart(LinePlot.name)):
            prepared = chart.prepare_from_posts(posts)
            path = self.data_dir / chart.source_file
            path.parent.mkdir(parents=True, exist_ok=True)
            prepared.to_csv(path, index=False)
            LOGGER.info("Wrote %d rows to %s", len(prepared), path)
            written[chart.name] = path
        return written

    def _write_status(self, status: dict, *, success: bool, detail: str | None) -> None:
        status["success"] = success
        if detail:
            status["detail"] = detail
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / STATUS_NAME
        with path.open("w", encoding="utf-8") as handle:
            json.dump(status, handle, indent=2, sort_keys=True)
