"""HTTP implementation of :class:`DataSource`."""

from __future__ import annotations

from io import StringIO

import pandas as pd
import requests

from socialcharts.config import DEFAULT_HTTP_TIMEOUT
from socialcharts.sources.base import DataSource, SourceError


class HttpCsvSource(DataSource):
    """Fetch CSV documents over HTTP(S)."""

    def __init__(self, timeout: float = DEFAULT_HTTP_TIMEOUT) -> None:
        self.timeout = timeout

    def read(self, location: str) -> pd.DataFrame:
        """
        Download ``location`` and parse the body as CSV.
        """

        try:
            response = requests.get(location, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise SourceError(f"Download failed for {location}: {exc}") from exc
        try:
            return pd.read_csv(StringIO(response.text), dtype=str, skipinitialspace=True)
        except (pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
            raise SourceError(f"Could not parse CSV from {location}: {exc}") from exc
