"""Filesystem implementation of :class:`DataSource`."""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from socialcharts.sources.base import DataSource, SourceError


class LocalCsvSource(DataSource):
    """Read CSV files, resolving relative names against a data directory."""

    def __init__(self, data_dir: Path | str | None = None) -> None:
        self.data_dir = Path(data_dir) if data_dir is not None else None

    def resolve(self, location: str) -> Path:
        path = Path(location).expanduser()
        if not path.is_absolute() and self.data_dir is not None:
            path = self.data_dir / path
        return path

    def exists(self, location: str) -> bool:
        return self.resolve(location).is_file()

    def read(self, location: str) -> pd.DataFrame:
        """
        Load a CSV file with every column kept as text.
        """

        path = self.resolve(location)
        if not path.is_file():
            raise SourceError(f"CSV file not found: {path}")
        try:
            return pd.read_csv(path, dtype=str, skipinitialspace=True)
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
            raise SourceError(f"Could not parse {path}: {exc}") from exc
