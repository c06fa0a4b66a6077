"""Data source implementations for loading CSV rows."""

from __future__ import annotations

from .base import DataSource, SourceError
from .http_source import HttpCsvSource
from .local_source import LocalCsvSource
from .routed_source import RoutedSource

__all__ = ["DataSource", "HttpCsvSource", "LocalCsvSource", "RoutedSource", "SourceError"]
