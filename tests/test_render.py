import pandas as pd
import pytest

from socialcharts.charts import BoxPlot, LinePlot
from socialcharts.render import draw_scene, render_scene
from socialcharts.scene import Line, Rect, Scene, Text


def _boxplot_scene() -> Scene:
    chart = BoxPlot()
    df = pd.DataFrame({"Platform": ["A", "A", "B", "B"], "Likes": ["1", "5", "2", "8"]})
    return chart.build(chart.prepare(df))


def test_draw_scene_maps_commands_to_artists():
    scene = _boxplot_scene()
    fig = draw_scene(scene)
    ax = fig.axes[0]
    assert len(ax.patches) == len(scene.of_kind("rect")) + len(scene.of_kind("path"))
    assert len(ax.lines) == len(scene.of_kind("line"))
    assert len(ax.texts) == len(scene.of_kind("text"))
    assert ax.get_ylim() == (400, 0)


def test_render_scene_writes_png(tmp_path):
    out = render_scene(_boxplot_scene(), tmp_path / "charts" / "boxplot.png")
    assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_render_scene_writes_svg(tmp_path):
    chart = LinePlot()
    df = pd.DataFrame({"Date": ["d1", "d2", "d3"], "Likes": [1.0, 3.0, 2.0]})
    out = render_scene(chart.build(df), tmp_path / "lineplot.svg")
    assert "<svg" in out.read_text()


def test_render_scene_rejects_unknown_suffix(tmp_path):
    scene = Scene(width=10, height=10, commands=[Rect(0, 0, 5, 5), Line(0, 0, 5, 5), Text(1, 1, "x")])
    with pytest.raises(ValueError):
        render_scene(scene, tmp_path / "chart.gif")
