"""Bulk export of generated schemas as a Word-compatible HTML document."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from backend.schema.builder import build_schema
from backend.schema.errors import ExportError
from backend.schema.models import NumberedSchema

WORD_MEDIA_TYPE = "application/msword"

_DOCUMENT_OPEN = (
    '<html xmlns:o="urn:schemas-microsoft-com:office:office" '
    'xmlns:w="urn:schemas-microsoft-com:office:word" '
    'xmlns="http://www.w3.org/TR/REC-html40">'
    '<head><meta charset="utf-8"><title>Schemas JSON-LD</title></head>'
    "<body>"
)
_DOCUMENT_CLOSE = "</body></html>"

_ITEM_TEMPLATE = (
    '<div style="margin-bottom: 40px; page-break-inside: avoid;">'
    '<h2 style="color: #333;">{label}</h2>'
    '<p style="font-weight: bold;">URL: {url}</p>'
    "<p>Título: {title}</p>"
    '<pre style="background-color: #f5f5f5; padding: 10px; border: 1px solid #ddd; '
    'white-space: pre-wrap; font-family: Consolas, monospace;">{snippet}</pre>'
    "</div>"
)

_HTML_ESCAPES = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
})


def escape_html(text: str) -> str:
    return text.translate(_HTML_ESCAPES)


def renumber(pairs: Iterable[Tuple[str, str]]) -> List[NumberedSchema]:
    """Turn ``(url, title)`` pairs into numbered items with fresh snippets.

    Snippets are rebuilt from the current title so edited titles are
    exported in sync with their schema.
    """
    return [
        NumberedSchema(number=i, url=url, title=title, snippet=build_schema(url, title).snippet)
        for i, (url, title) in enumerate(pairs, start=1)
    ]


def build_word_document(items: Sequence[NumberedSchema]) -> str:
    """Render *items* into a single document Word opens as ``.doc``.

    Raises:
        ExportError: If *items* is empty.
    """
    if not items:
        raise ExportError()

    blocks = [
        _ITEM_TEMPLATE.format(
            label=escape_html(item.label),
            url=escape_html(item.url),
            title=escape_html(item.title),
            snippet=escape_html(item.snippet),
        )
        for item in items
    ]
    return _DOCUMENT_OPEN + "".join(blocks) + _DOCUMENT_CLOSE
