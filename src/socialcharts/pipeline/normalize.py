"""Normalization helpers for raw CSV frames."""

from __future__ import annotations

import logging
from typing import Iterable

import pandas as pd

LOGGER = logging.getLogger("socialcharts.pipeline")


class MissingColumnError(ValueError):
    """Raised when a frame lacks a column a chart needs."""


def require_columns(df: pd.DataFrame, columns: Iterable[str]) -> None:
    missing = [col for col in columns if col not in df.columns]
    if missing:
        raise MissingColumnError(f"Missing required columns: {', '.join(missing)}")


def coerce_numeric(df: pd.DataFrame, columns: Iterable[str]) -> pd.DataFrame:
    """
    Convert string columns to numbers and drop rows that fail conversion.
    """

    columns = list(columns)
    require_columns(df, columns)
    result = df.copy()
    for col in columns:
        if not pd.api.types.is_numeric_dtype(result[col]):
            result[col] = result[col].astype(str).str.replace(",", "", regex=False).str.strip()
        result[col] = pd.to_numeric(result[col], errors="coerce")
    invalid = result[columns].isna().any(axis=1)
    if invalid.any():
        LOGGER.warning("Dropping %d rows with non-numeric %s", int(invalid.sum()), ", ".join(columns))
        result = result.loc[~invalid]
    return result.reset_index(drop=True)


def normalize(df: pd.DataFrame, *, value_col: str = "Likes") -> pd.DataFrame:
    """
    Strip header whitespace and coerce the value column to numbers.
    """

    normalized = df.rename(columns=lambda name: str(name).strip())
    return coerce_numeric(normalized, [value_col])
