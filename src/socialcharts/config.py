"""Shared configuration helpers for socialcharts."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

REPO_ROOT = Path(__file__).resolve().parents[2]

CHART_NAMES = ("boxplot", "barplot", "lineplot")
OUTPUT_FORMATS = ("png", "svg")


def _resolve_path_from_env(name: str, default: Path) -> Path:
    value = os.environ.get(name)
    if not value:
        return default
    candidate = Path(value).expanduser()
    if not candidate.is_absolute():
        candidate = (REPO_ROOT / candidate).resolve()
    return candidate


def _int_from_env(name: str, default: int) -> int:
    value = os.environ.get(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def get_data_dir() -> Path:
    """Return where the input CSV files live."""

    return _resolve_path_from_env("SOCIALCHARTS_DATA_DIR", REPO_ROOT / "data")


def get_output_dir() -> Path:
    """Return where rendered charts should be written."""

    return _resolve_path_from_env("SOCIALCHARTS_OUTPUT_DIR", REPO_ROOT / "charts_output")


DEFAULT_WIDTH = _int_from_env("SOCIALCHARTS_WIDTH", 600)
DEFAULT_HEIGHT = _int_from_env("SOCIALCHARTS_HEIGHT", 400)
DEFAULT_BACKGROUND = os.environ.get("SOCIALCHARTS_BACKGROUND", "#e9f7f2")
DEFAULT_HTTP_TIMEOUT = _int_from_env("SOCIALCHARTS_HTTP_TIMEOUT", 30)
DEFAULT_LOG_LEVEL = os.environ.get("SOCIALCHARTS_LOG_LEVEL", "INFO").upper()


def get_output_format() -> str:
    """Return the image format for rendered charts."""

    value = os.environ.get("SOCIALCHARTS_FORMAT", "png").strip().lower()
    return value if value in OUTPUT_FORMATS else "png"


def get_charts(defaults: Iterable[str] = CHART_NAMES) -> list[str]:
    """Return the ordered list of charts to render."""

    override = os.environ.get("SOCIALCHARTS_CHARTS")
    if not override:
        return list(defaults)
    return [item.strip().lower() for item in override.split(",") if item.strip()]
