"""Deterministic page titles derived from a URL's path.

Used whenever the real ``<title>`` of a page cannot be fetched.  The rules,
in priority order:

1. No path segments → ``"Página de <host>"`` (first ``www.`` removed).
2. The URL mentions ``malla-curricular`` and the segment just before the
   ``malla-curricular`` segment exists →
   ``"Malla curricular | <Programme> | Pregrado UPC"``.
3. Otherwise every segment is formatted and joined with ``" | "``, followed
   by ``" | Pregrado UPC"``.
"""

from __future__ import annotations

import re
from typing import List
from urllib.parse import urlsplit

from backend.schema.urls import SPECIAL_SCHEMES, is_valid_url

CURRICULUM_SEGMENT = "malla-curricular"
TITLE_SUFFIX = "Pregrado UPC"
GENERIC_TITLE = "Página de Pregrado UPC"

_WORD_START_RE = re.compile(r"(^|\s)(\S)")


def title_case(text: str) -> str:
    """Uppercase the first letter of each whitespace-separated word.

    The rest of each word is left untouched, so ``"UPC-lima"`` style input
    keeps its existing capitals.
    """
    return _WORD_START_RE.sub(lambda m: m.group(1) + m.group(2).upper(), text)


def format_segment(segment: str) -> str:
    """``"ingenieria-de-software"`` → ``"Ingenieria De Software"``."""
    return title_case(segment.replace("-", " "))


_SINGLE_DOT = {".", "%2e"}
_DOUBLE_DOT = {"..", ".%2e", "%2e.", "%2e%2e"}


def path_segments(path: str, backslash_is_slash: bool = False) -> List[str]:
    """Split *path* into non-empty segments after resolving ``.`` and ``..``.

    Dot segments are applied the way a WHATWG URL parser does before the
    split, so ``/a/../b`` yields ``["b"]``.
    """
    if backslash_is_slash:
        path = path.replace("\\", "/")
    if path.startswith("/"):
        path = path[1:]

    resolved: List[str] = []
    for segment in path.split("/"):
        lowered = segment.lower()
        if lowered in _DOUBLE_DOT:
            if resolved:
                resolved.pop()
        elif lowered not in _SINGLE_DOT:
            resolved.append(segment)
    return [segment for segment in resolved if segment]


def synthesize_title(url: str) -> str:
    """Build a title for *url* from its host and path segments.

    Pure and total: an unparsable URL yields :data:`GENERIC_TITLE`.
    """
    if not is_valid_url(url):
        return GENERIC_TITLE
    parts = urlsplit(url)
    segments = path_segments(
        parts.path, backslash_is_slash=parts.scheme.lower() in SPECIAL_SCHEMES
    )

    if not segments:
        host = parts.hostname or ""
        return f"Página de {host.replace('www.', '', 1)}"

    # Substring test on the whole URL, then an exact segment lookup.
    if CURRICULUM_SEGMENT in url and CURRICULUM_SEGMENT in segments:
        programme_index = segments.index(CURRICULUM_SEGMENT) - 1
        if programme_index >= 0:
            programme = format_segment(segments[programme_index])
            return f"Malla curricular | {programme} | {TITLE_SUFFIX}"

    formatted = " | ".join(format_segment(segment) for segment in segments)
    return f"{formatted} | {TITLE_SUFFIX}"
