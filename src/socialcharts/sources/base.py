"""Core interfaces for CSV data sources."""

from __future__ import annotations

from abc import ABC, abstractmethod

import pandas as pd


class SourceError(Exception):
    """Raised when a data source cannot satisfy a request."""


class DataSource(ABC):
    """Abstract base class for tabular data sources."""

    @abstractmethod
    def read(self, location: str) -> pd.DataFrame:
        """Return the raw rows stored at ``location`` as a DataFrame."""

    def exists(self, location: str) -> bool:
        """Report whether ``location`` can be read without fetching it."""

        return True
