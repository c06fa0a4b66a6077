"""Command-line entry point for socialcharts."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from socialcharts.config import CHART_NAMES, DEFAULT_LOG_LEVEL, OUTPUT_FORMATS
from socialcharts.runner import POSTS_FILE, ChartRunner
from socialcharts.charts import BoxPlot
from socialcharts.sources import SourceError


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(levelname)s:%(name)s:%(message)s",
    )
    logging.getLogger().setLevel(getattr(logging, level.upper(), logging.INFO))


@click.group()
@click.option("--log-level", default=DEFAULT_LOG_LEVEL, show_default=True, help="Logging level.")
def main(log_level: str) -> None:
    """Render social-media charts from CSV data."""

    _configure_logging(log_level)


@main.command()
@click.option("--data-dir", type=click.Path(path_type=Path), default=None, help="Directory holding the CSV files.")
@click.option("--output-dir", type=click.Path(path_type=Path), default=None, help="Where charts are written.")
@click.option("--format", "output_format", type=click.Choice(OUTPUT_FORMATS), default=None, help="Image format.")
@click.option("--chart", "charts", type=click.Choice(CHART_NAMES), multiple=True, help="Chart to render (repeatable).")
def render(data_dir: Path | None, output_dir: Path | None, output_format: str | None, charts: tuple[str, ...]) -> None:
    """
    Render the boxplot, bar chart and line chart.
    """

    runner = ChartRunner(
        charts=list(charts) or None,
        data_dir=data_dir,
        output_dir=output_dir,
        output_format=output_format,
    )
    try:
        result = runner.run()
    except RuntimeError as exc:
        raise click.ClickException(str(exc)) from exc
    for name, path in result["charts"].items():
        click.echo(f"{name}: {path}")


@main.command()
@click.option("--data-dir", type=click.Path(path_type=Path), default=None, help="Directory holding the CSV files.")
def prepare(data_dir: Path | None) -> None:
    """Write the averaged bar and line chart CSVs from the posts file."""

    runner = ChartRunner(data_dir=data_dir)
    for name, path in runner.prepare_files().items():
        click.echo(f"{name}: {path}")


@main.command()
@click.option("--data-dir", type=click.Path(path_type=Path), default=None, help="Directory holding the CSV files.")
@click.option("--source", "location", default=POSTS_FILE, show_default=True, help="CSV file name or URL.")
def summary(data_dir: Path | None, location: str) -> None:
    """Print the five-number summary of likes per platform."""

    runner = ChartRunner(data_dir=data_dir)
    chart = BoxPlot()
    try:
        df = chart.prepare(runner.source.read(location))
    except (SourceError, ValueError) as exc:
        raise click.ClickException(str(exc)) from exc
    for group, stats in chart.summaries(df).items():
        click.echo(
            f"{group}: min={stats.min:g} q1={stats.q1:g} median={stats.median:g} "
            f"q3={stats.q3:g} max={stats.max:g}"
        )
