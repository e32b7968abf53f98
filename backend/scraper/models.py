"""Data models for the relay fetcher."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RawPage:
    """The page HTML returned by the relay for a single URL fetch."""

    url: str
    html: str
    status_code: int
