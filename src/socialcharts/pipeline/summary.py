"""Five-number summaries of grouped values."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Iterable, Mapping, NamedTuple, Sequence

import numpy as np
import pandas as pd

QUARTILES = (0.25, 0.5, 0.75)


class Record(NamedTuple):
    """A single observation tagged with the group it belongs to."""

    group_key: str
    value: float


@dataclass(frozen=True)
class Summary:
    min: float
    q1: float
    median: float
    q3: float
    max: float

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


def quantile(sorted_values: np.ndarray, q: float) -> float:
    """
    Linearly interpolate the ``q`` quantile of an ascending array.

    Uses ``h = q * (n - 1)`` and blends the order statistics either side of it.
    """

    if len(sorted_values) == 0:
        raise ValueError("Cannot take a quantile of an empty array.")
    h = q * (len(sorted_values) - 1)
    lo = int(np.floor(h))
    hi = int(np.ceil(h))
    low_value = sorted_values[lo]
    return float(low_value + (h - lo) * (sorted_values[hi] - low_value))


def summarize_values(values: Iterable[float]) -> Summary:
    """Compute min/q1/median/q3/max for a non-empty collection of numbers."""

    ordered = np.sort(np.asarray(list(values), dtype=float))
    if ordered.size == 0:
        raise ValueError("Cannot summarize an empty group.")
    q1, median, q3 = (quantile(ordered, q) for q in QUARTILES)
    return Summary(
        min=float(ordered[0]),
        q1=q1,
        median=median,
        q3=q3,
        max=float(ordered[-1]),
    )


def summarize(records: Sequence[Record]) -> dict[str, Summary]:
    """
    Partition records by group key and summarize each group.

    Groups come back in the order their keys first appear.
    """

    groups: dict[str, list[float]] = {}
    for group_key, value in records:
        groups.setdefault(group_key, []).append(value)
    return {key: summarize_values(values) for key, values in groups.items()}


def records_from_frame(df: pd.DataFrame, group_col: str, value_col: str) -> list[Record]:
    """Build records from two columns of a frame."""

    return [
        Record(str(key), float(value))
        for key, value in zip(df[group_col], df[value_col])
    ]


def summarize_frame(df: pd.DataFrame, group_col: str, value_col: str) -> dict[str, Summary]:
    """Summarize ``value_col`` grouped by ``group_col``."""

    return summarize(records_from_frame(df, group_col, value_col))


def summaries_to_dict(summaries: Mapping[str, Summary]) -> dict[str, dict[str, float]]:
    """Return a JSON-friendly copy of a summary mapping."""

    return {key: summary.to_dict() for key, summary in summaries.items()}
