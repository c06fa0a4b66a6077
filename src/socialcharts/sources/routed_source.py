"""Source that routes reads to HTTP or the local filesystem."""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from socialcharts.sources.base import DataSource
from socialcharts.sources.http_source import HttpCsvSource
from socialcharts.sources.local_source import LocalCsvSource

LOGGER = logging.getLogger("socialcharts.sources")
REMOTE_SCHEMES = ("http://", "https://")


def is_remote(location: str) -> bool:
    return location.lower().startswith(REMOTE_SCHEMES)


class RoutedSource(DataSource):
    """Send URLs to :class:`HttpCsvSource` and everything else to disk."""

    def __init__(
        self,
        data_dir: Path | str | None = None,
        *,
        http: HttpCsvSource | None = None,
    ) -> None:
        self.local = LocalCsvSource(data_dir)
        self.http = http or HttpCsvSource()

    def exists(self, location: str) -> bool:
        if is_remote(location):
            return True
        return self.local.exists(location)

    def read(self, location: str) -> pd.DataFrame:
        source = self.http if is_remote(location) else self.local
        LOGGER.debug("Reading %s via %s", location, type(source).__name__)
        df = source.read(location)
        LOGGER.info("Loaded %d rows from %s", len(df), location)
        return df
