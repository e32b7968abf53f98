"""Tests for the JSON-LD schema builder."""

from __future__ import annotations

import json

from backend.schema.builder import (
    SCRIPT_CLOSE,
    SCRIPT_OPEN,
    build_record,
    build_schema,
)
from backend.schema.models import SchemaSnippet

_URL = "https://pregrado.upc.edu.pe/arquitectura"


def _payload(snippet: str) -> dict:
    """Strip the <script> wrapper and parse the JSON body."""
    assert snippet.startswith(SCRIPT_OPEN + "\n")
    assert snippet.endswith("\n" + SCRIPT_CLOSE)
    return json.loads(snippet[len(SCRIPT_OPEN) + 1 : -len(SCRIPT_CLOSE) - 1])


class TestBuildRecord:
    def test_slots_are_filled_verbatim(self) -> None:
        url = "HTTPS://Example.com/Path/?q=1"
        record = build_record(url, "Mi Título")
        assert record["url"] == url
        assert record["alternateName"] == "Mi Título"

    def test_constant_fields(self) -> None:
        record = build_record(_URL, "x")
        assert record["@context"] == "https://schema.org"
        assert record["@type"] == "EducationalOrganization"
        assert record["name"] == "Pregrado"
        assert record["logo"] == "https://pregrado.upc.edu.pe/static/img/logo1.png"
        assert record["contactPoint"] == {
            "@type": "ContactPoint",
            "telephone": "(01)630-3333",
            "contactType": "customer service",
            "contactOption": "TollFree",
            "areaServed": "PE",
            "availableLanguage": "es",
        }
        assert record["sameAs"] == [
            "https://www.facebook.com/upcedu",
            "https://x.com/upcedu",
            "https://www.youtube.com/user/UPCedupe",
        ]

    def test_field_order(self) -> None:
        assert list(build_record(_URL, "x")) == [
            "@context",
            "@type",
            "name",
            "alternateName",
            "url",
            "logo",
            "contactPoint",
            "sameAs",
        ]

    def test_records_do_not_share_state(self) -> None:
        first = build_record(_URL, "a")
        first["sameAs"].append("https://evil.example")
        first["contactPoint"]["telephone"] = "0"
        second = build_record(_URL, "a")
        assert len(second["sameAs"]) == 3
        assert second["contactPoint"]["telephone"] == "(01)630-3333"


class TestBuildSchema:
    def test_returns_record_and_snippet(self) -> None:
        schema = build_schema(_URL, "Arquitectura | UPC")
        assert isinstance(schema, SchemaSnippet)
        assert _payload(schema.snippet) == schema.record

    def test_two_space_indentation(self) -> None:
        snippet = build_schema(_URL, "T").snippet
        assert '\n  "@context": "https://schema.org",\n' in snippet
        assert '\n    "@type": "ContactPoint",\n' in snippet

    def test_non_ascii_written_as_is(self) -> None:
        snippet = build_schema(_URL, "Página de diseño").snippet
        assert '"alternateName": "Página de diseño"' in snippet

    def test_deterministic(self) -> None:
        assert build_schema(_URL, "T").snippet == build_schema(_URL, "T").snippet

    def test_retitle_changes_only_alternate_name(self) -> None:
        old = build_schema(_URL, "Old title")
        new = build_schema(_URL, "New title")

        changed = {k for k in old.record if old.record[k] != new.record[k]}
        assert changed == {"alternateName"}

        old_lines = old.snippet.splitlines()
        new_lines = new.snippet.splitlines()
        diff = [(a, b) for a, b in zip(old_lines, new_lines) if a != b]
        assert diff == [
            ('  "alternateName": "Old title",', '  "alternateName": "New title",')
        ]
