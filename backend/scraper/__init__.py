"""Scraper package: relay fetch & title extraction."""

from backend.scraper.extractor import extract_title
from backend.scraper.fetcher import RelayError, fetch_via_relay
from backend.scraper.models import RawPage

__all__ = ["fetch_via_relay", "extract_title", "RelayError", "RawPage"]
