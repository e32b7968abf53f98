"""JSON-LD ``EducationalOrganization`` schema for a single page.

The record is a fixed template with two variable slots: ``url`` (copied
verbatim) and ``alternateName`` (the page title).  Building is pure, so an
edited title is applied by calling :func:`build_schema` again.
"""

from __future__ import annotations

import json
from typing import Any, Dict

from backend.schema.models import SchemaSnippet

SCHEMA_CONTEXT = "https://schema.org"
ORGANIZATION_TYPE = "EducationalOrganization"
ORGANIZATION_NAME = "Pregrado"
LOGO_URL = "https://pregrado.upc.edu.pe/static/img/logo1.png"

CONTACT_TELEPHONE = "(01)630-3333"
CONTACT_TYPE = "customer service"
CONTACT_OPTION = "TollFree"
AREA_SERVED = "PE"
AVAILABLE_LANGUAGE = "es"

SAME_AS = (
    "https://www.facebook.com/upcedu",
    "https://x.com/upcedu",
    "https://www.youtube.com/user/UPCedupe",
)

LD_JSON_MEDIA_TYPE = "application/ld+json"
SCRIPT_OPEN = f'<script type="{LD_JSON_MEDIA_TYPE}">'
SCRIPT_CLOSE = "</script>"


def build_record(url: str, title: str) -> Dict[str, Any]:
    """Return a fresh schema record for *url* titled *title*."""
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": ORGANIZATION_TYPE,
        "name": ORGANIZATION_NAME,
        "alternateName": title,
        "url": url,
        "logo": LOGO_URL,
        "contactPoint": {
            "@type": "ContactPoint",
            "telephone": CONTACT_TELEPHONE,
            "contactType": CONTACT_TYPE,
            "contactOption": CONTACT_OPTION,
            "areaServed": AREA_SERVED,
            "availableLanguage": AVAILABLE_LANGUAGE,
        },
        "sameAs": list(SAME_AS),
    }


def render_snippet(record: Dict[str, Any]) -> str:
    """Serialise *record* with 2-space indentation inside a ``<script>`` block.

    Non-ASCII characters are written as-is, matching ``JSON.stringify``.
    """
    body = json.dumps(record, indent=2, ensure_ascii=False)
    return f"{SCRIPT_OPEN}\n{body}\n{SCRIPT_CLOSE}"


def build_schema(url: str, title: str) -> SchemaSnippet:
    record = build_record(url, title)
    return SchemaSnippet(record=record, snippet=render_snippet(record))
