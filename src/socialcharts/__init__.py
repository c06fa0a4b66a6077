"""Render social-media charts from CSV data."""

from __future__ import annotations

__version__ = "0.1.0"
