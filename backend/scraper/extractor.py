"""Title extraction from raw page HTML."""

from __future__ import annotations

from bs4 import BeautifulSoup


def extract_title(html: str) -> str:
    """Return the trimmed text of the first ``<title>`` element, or ``""``.

    The document is parsed with BeautifulSoup's ``html.parser``, so
    attributes and entities are handled.  Unlike a browser, which keeps
    ``<title>`` content as raw text, tags inside it may be parsed as markup
    and dropped, leaving only their text.
    """
    soup = BeautifulSoup(html, "html.parser")
    tag = soup.find("title")
    if tag is None:
        return ""
    return tag.get_text().strip()
