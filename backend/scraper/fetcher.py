"""HTTP fetcher that retrieves page HTML through a public CORS relay.

The relay answers ``GET <relay_url>?url=<target>`` with a JSON envelope whose
``contents`` field holds the raw HTML of the target page.
"""

from __future__ import annotations

import httpx

from backend.config import settings
from backend.scraper.models import RawPage

_DEFAULT_HEADERS = {
    "Accept": "application/json",
    "User-Agent": "Mozilla/5.0 (compatible; SchemaLD-Bot/1.0)",
}


class RelayError(Exception):
    """Raised when the relay answers with a payload we cannot use."""


def _parse_payload(response: httpx.Response) -> str:
    """Return the ``contents`` string from a relay response body."""
    try:
        data = response.json()
    except ValueError as exc:
        raise RelayError(f"relay returned non-JSON body: {exc}") from exc

    if not isinstance(data, dict):
        raise RelayError("relay payload is not a JSON object")

    contents = data.get("contents")
    if not isinstance(contents, str):
        raise RelayError("relay payload has no 'contents' string")
    return contents


def fetch_via_relay(url: str) -> RawPage:
    """Fetch the HTML of *url* through the relay and return a :class:`RawPage`.

    A single request is made; there are no retries.

    Raises:
        httpx.HTTPError: On transport errors or a 4xx/5xx relay status.
        RelayError: If the relay body is not the expected JSON envelope.
    """
    with httpx.Client(
        headers=_DEFAULT_HEADERS,
        timeout=settings.request_timeout,
        follow_redirects=True,
    ) as client:
        response = client.get(settings.relay_url, params={"url": url})
        response.raise_for_status()
        html = _parse_payload(response)

    return RawPage(url=url, html=html, status_code=response.status_code)
