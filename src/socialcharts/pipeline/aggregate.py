"""Aggregations that prepare the bar and line chart inputs."""

from __future__ import annotations

from typing import Sequence

import pandas as pd

from socialcharts.pipeline.normalize import require_columns

WEEKDAY_SUFFIX = r"\s*\([^)]*\)\s*$"


def average_likes(
    df: pd.DataFrame,
    by: Sequence[str] = ("Platform", "PostType"),
    value: str = "Likes",
) -> pd.DataFrame:
    """
    Mean of ``value`` for every combination of ``by``, in first-appearance order.
    """

    by = list(by)
    require_columns(df, [*by, value])
    if df.empty:
        return pd.DataFrame(columns=[*by, value])
    grouped = df.groupby(by, sort=False)[value].mean().round(2)
    return grouped.reset_index()


def parse_dates(dates: pd.Series) -> pd.Series:
    """Parse date labels, ignoring a trailing parenthesised weekday."""

    cleaned = dates.astype(str).str.replace(WEEKDAY_SUFFIX, "", regex=True)
    return pd.to_datetime(cleaned, format="mixed", errors="coerce")


def likes_over_time(
    df: pd.DataFrame,
    date_col: str = "Date",
    value: str = "Likes",
) -> pd.DataFrame:
    """
    Mean of ``value`` per date.

    Rows are ordered chronologically when every label parses as a date, and by
    first appearance otherwise.
    """

    require_columns(df, [date_col, value])
    if df.empty:
        return pd.DataFrame(columns=[date_col, value])
    result = df.groupby(date_col, sort=False)[value].mean().round(2).reset_index()
    parsed = parse_dates(result[date_col])
    if parsed.notna().all():
        result = result.iloc[parsed.argsort(kind="stable").to_numpy()].reset_index(drop=True)
    return result
