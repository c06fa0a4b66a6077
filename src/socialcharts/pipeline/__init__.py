"""Pipeline helpers for normalizing, aggregating, and summarizing records."""

from __future__ import annotations

from .aggregate import average_likes, likes_over_time
from .normalize import MissingColumnError, coerce_numeric, normalize
from .summary import Record, Summary, summarize, summarize_frame

__all__ = [
    "MissingColumnError",
    "Record",
    "Summary",
    "average_likes",
    "coerce_numeric",
    "likes_over_time",
    "normalize",
    "summarize",
    "summarize_frame",
]
