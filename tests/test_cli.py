from click.testing import CliRunner

from socialcharts.cli import main


def test_render_command_writes_charts(data_dir, tmp_path):
    out_dir = tmp_path / "out"
    result = CliRunner().invoke(
        main,
        ["render", "--data-dir", str(data_dir), "--output-dir", str(out_dir), "--format", "svg", "--chart", "barplot"],
    )
    assert result.exit_code == 0, result.output
    assert "barplot:" in result.output
    assert (out_dir / "barplot.svg").exists()
    assert not (out_dir / "boxplot.svg").exists()


def test_render_command_reports_failure(tmp_path):
    result = CliRunner().invoke(
        main,
        ["render", "--data-dir", str(tmp_path / "missing"), "--output-dir", str(tmp_path / "out")],
    )
    assert result.exit_code != 0
    assert "No charts were produced." in result.output


def test_summary_command_prints_quartiles(data_dir):
    result = CliRunner().invoke(main, ["summary", "--data-dir", str(data_dir)])
    assert result.exit_code == 0, result.output
    assert "Instagram: min=1 q1=3.25 median=5.5 q3=7.75 max=10" in result.output
    assert "Twitter: min=4 q1=4.5 median=5 q3=5.5 max=6" in result.output


def test_prepare_command_writes_csvs(posts_only_dir):
    result = CliRunner().invoke(main, ["prepare", "--data-dir", str(posts_only_dir)])
    assert result.exit_code == 0, result.output
    assert (posts_only_dir / "socialMediaAvg.csv").exists()
    assert (posts_only_dir / "socialMediaTime.csv").exists()
