import json
from pathlib import Path

import pytest

from socialcharts.charts import BoxPlot, ChartLayout, Margin
from socialcharts.runner import ChartRunner


def _fake_renderer(calls: list[Path]):
    def render(scene, out_path: Path) -> None:
        calls.append(out_path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(f"fake chart {scene.width}x{scene.height}")

    return render


def test_runner_renders_all_charts(data_dir, tmp_path):
    calls: list[Path] = []
    runner = ChartRunner(
        data_dir=data_dir,
        output_dir=tmp_path / "out",
        output_format="png",
        renderer=_fake_renderer(calls),
    )
    result = runner.run()
    assert [path.name for path in calls] == ["boxplot.png", "barplot.png", "lineplot.png"]
    latest = json.loads(result["json"].read_text())
    assert latest["boxplot"]["summaries"]["Instagram"]["median"] == pytest.approx(5.5)
    assert latest["barplot"]["source"] == "socialMediaAvg.csv"
    assert latest["lineplot"]["scene"]["width"] == 600
    status = json.loads((tmp_path / "out" / "charts_status.json").read_text())
    assert status["success"] is True
    assert status["charts"]["barplot"]["scene"]["command_breakdown"]["rect"] == 6


def test_runner_derives_missing_inputs_from_posts(posts_only_dir, tmp_path):
    calls: list[Path] = []
    runner = ChartRunner(
        charts=["barplot", "lineplot"],
        data_dir=posts_only_dir,
        output_dir=tmp_path / "out",
        output_format="svg",
        renderer=_fake_renderer(calls),
    )
    result = runner.run()
    assert set(result["charts"]) == {"barplot", "lineplot"}
    latest = json.loads(result["json"].read_text())
    assert latest["barplot"]["rows"] == 4
    assert latest["lineplot"]["rows"] == 5


def test_runner_records_partial_failures(data_dir, tmp_path):
    (data_dir / "socialMediaTime.csv").write_text("When,Likes\nmonday,3\n")
    runner = ChartRunner(
        charts=["boxplot", "lineplot"],
        data_dir=data_dir,
        output_dir=tmp_path / "out",
        renderer=_fake_renderer([]),
    )
    result = runner.run()
    assert list(result["charts"]) == ["boxplot"]
    status = json.loads((tmp_path / "out" / "charts_status.json").read_text())
    assert status["success"] is False
    assert status["charts"]["lineplot"]["ok"] is False
    assert "Date" in status["charts"]["lineplot"]["error"]


def test_runner_raises_when_nothing_renders(tmp_path):
    runner = ChartRunner(
        data_dir=tmp_path / "empty",
        output_dir=tmp_path / "out",
        renderer=_fake_renderer([]),
    )
    with pytest.raises(RuntimeError):
        runner.run()
    status = json.loads((tmp_path / "out" / "charts_status.json").read_text())
    assert status["success"] is False
    assert status["detail"] == "No charts were produced."


def test_runner_rejects_unknown_chart_and_format(tmp_path):
    with pytest.raises(ValueError):
        ChartRunner(output_format="gif", data_dir=tmp_path, output_dir=tmp_path)
    with pytest.raises(ValueError):
        ChartRunner(charts=["pie"], data_dir=tmp_path, output_dir=tmp_path).run()


def test_prepare_files_writes_aggregates(posts_only_dir):
    written = ChartRunner(data_dir=posts_only_dir).prepare_files()
    assert written["barplot"].name == "socialMediaAvg.csv"
    avg = written["barplot"].read_text().splitlines()
    assert avg[0] == "Platform,PostType,Likes"
    assert avg[1] == "Instagram,Image,5.0"
    time_rows = written["lineplot"].read_text().splitlines()
    assert time_rows[1].startswith("3/1/2024 (Friday),")


def test_runner_renders_real_svg(data_dir, tmp_path):
    result = ChartRunner(
        charts=["boxplot"],
        data_dir=data_dir,
        output_dir=tmp_path / "out",
        output_format="svg",
    ).run()
    assert "<svg" in result["charts"]["boxplot"].read_text()


def test_runner_layout_keeps_chart_margins(tmp_path):
    layout = ChartLayout(width=800, margin=Margin(5, 5, 5, 5), background=None)
    runner = ChartRunner(data_dir=tmp_path, output_dir=tmp_path, layout=layout)
    bar = runner._make_chart("barplot")
    line = runner._make_chart("lineplot")
    assert bar.layout.width == 800
    assert bar.layout.background is None
    assert bar.layout.margin.right == 100
    assert line.layout.margin.bottom == 70
    assert runner._make_chart("boxplot").layout.margin == BoxPlot.default_margin
