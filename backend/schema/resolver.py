"""Title resolution: the page's real ``<title>``, else a synthesised one.

Resolution is a two-stage fallback chain.  :func:`fetch_page_title` returns
``None`` on any relay, HTTP or parsing problem; :func:`resolve_title` then
falls back to :func:`~backend.schema.titles.synthesize_title`.  Callers of
:func:`resolve_title` therefore always receive a usable title.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx
from bs4.exceptions import ParserRejectedMarkup

from backend.schema.titles import synthesize_title
from backend.scraper.extractor import extract_title
from backend.scraper.fetcher import RelayError, fetch_via_relay

logger = logging.getLogger(__name__)


def fetch_page_title(url: str) -> Optional[str]:
    """Fetch *url* through the relay and return its trimmed ``<title>``.

    Returns ``None`` when the request fails, the relay payload is malformed,
    the HTML cannot be parsed, or the page has no non-empty title.  Nothing
    is retried or cached.
    """
    try:
        raw = fetch_via_relay(url)
    except (httpx.HTTPError, httpx.InvalidURL, RelayError) as exc:
        logger.warning("Could not fetch title for %s: %s", url, exc)
        return None

    try:
        title = extract_title(raw.html)
    except ParserRejectedMarkup as exc:
        logger.warning("Could not parse HTML for %s: %s", url, exc)
        return None
    if not title:
        logger.info("No <title> found for %s, using URL-derived title", url)
        return None
    return title


def resolve_title(url: str) -> str:
    """Return the best available title for *url*.  Never raises."""
    return fetch_page_title(url) or synthesize_title(url)
