"""Tests for title resolution with URL-derived fallback.

All relay traffic is mocked with ``respx``.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import httpx
import respx
from bs4.exceptions import ParserRejectedMarkup

from backend.schema.resolver import fetch_page_title, resolve_title
from backend.schema.titles import synthesize_title

_RELAY = "https://api.allorigins.win/get"
_URL = "https://pregrado.upc.edu.pe/ingenieria-de-software/malla-curricular"


def _relay_page(html: str) -> httpx.Response:
    return httpx.Response(200, json={"contents": html})


class TestFetchPageTitle:
    def test_returns_trimmed_title(self) -> None:
        with respx.mock:
            respx.get(_RELAY).mock(
                return_value=_relay_page("<title>\n  Malla | UPC \n</title>")
            )
            assert fetch_page_title(_URL) == "Malla | UPC"

    def test_returns_none_on_http_error(self) -> None:
        with respx.mock:
            respx.get(_RELAY).mock(return_value=httpx.Response(503))
            assert fetch_page_title(_URL) is None

    def test_returns_none_without_title(self) -> None:
        with respx.mock:
            respx.get(_RELAY).mock(return_value=_relay_page("<html><body/></html>"))
            assert fetch_page_title(_URL) is None

    def test_returns_none_on_rejected_markup(self) -> None:
        """HTML the parser refuses is treated like a missing title."""
        with respx.mock:
            respx.get(_RELAY).mock(return_value=_relay_page("<![ x"))
            assert fetch_page_title(_URL) is None

    def test_failure_is_logged(self, caplog) -> None:
        with respx.mock:
            respx.get(_RELAY).mock(side_effect=httpx.ConnectTimeout)
            with caplog.at_level(logging.WARNING, logger="backend.schema.resolver"):
                fetch_page_title(_URL)

        assert _URL in caplog.text

    def test_single_request_no_retry(self) -> None:
        with respx.mock:
            route = respx.get(_RELAY).mock(return_value=httpx.Response(500))
            fetch_page_title(_URL)

        assert route.call_count == 1


class TestResolveTitle:
    def test_uses_page_title_when_available(self) -> None:
        with respx.mock:
            respx.get(_RELAY).mock(return_value=_relay_page("<title>Real Title</title>"))
            assert resolve_title(_URL) == "Real Title"

    def test_network_failure_falls_back_to_synthesized(self) -> None:
        with respx.mock:
            respx.get(_RELAY).mock(side_effect=httpx.ConnectError)
            title = resolve_title(_URL)

        assert title == synthesize_title(_URL)
        assert title == "Malla curricular | Ingenieria De Software | Pregrado UPC"

    def test_malformed_relay_body_falls_back(self) -> None:
        with respx.mock:
            respx.get(_RELAY).mock(return_value=httpx.Response(200, text="not json"))
            assert resolve_title("https://example.com/foo-bar") == "Foo Bar | Pregrado UPC"

    def test_empty_title_falls_back(self) -> None:
        with respx.mock:
            respx.get(_RELAY).mock(return_value=_relay_page("<title>   </title>"))
            assert resolve_title("https://example.com") == "Página de example.com"

    def test_same_url_is_fetched_each_time(self) -> None:
        with respx.mock:
            route = respx.get(_RELAY).mock(return_value=_relay_page("<title>T</title>"))
            resolve_title(_URL)
            resolve_title(_URL)

        assert route.call_count == 2

    def test_unparsable_html_falls_back(self) -> None:
        with respx.mock:
            respx.get(_RELAY).mock(return_value=_relay_page("<![ x"))
            assert resolve_title(_URL) == synthesize_title(_URL)

    def test_parser_rejection_falls_back(self) -> None:
        with respx.mock:
            respx.get(_RELAY).mock(return_value=_relay_page("<title>ok</title>"))
            with patch(
                "backend.schema.resolver.extract_title",
                side_effect=ParserRejectedMarkup("expected name token"),
            ):
                assert resolve_title(_URL) == synthesize_title(_URL)
