"""Data models for the schema pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Union


@dataclass
class SchemaSnippet:
    """A JSON-LD record and its ``<script>``-wrapped serialisation."""

    record: Dict[str, Any]
    snippet: str


@dataclass
class Success:
    """A URL that produced a schema."""

    url: str
    title: str
    record: Dict[str, Any]
    snippet: str


@dataclass
class Failure:
    """An input line that was rejected before title resolution."""

    line: str
    reason: str


Outcome = Union[Success, Failure]


@dataclass
class NumberedSchema:
    """A generated schema together with its position among the successes.

    Every field can be re-derived from ``(number, url, title)``, so an edited
    title only needs a fresh call to ``build_schema`` to refresh ``snippet``.
    """

    number: int
    url: str
    title: str
    snippet: str

    @property
    def label(self) -> str:
        return f"Schema #{self.number}"


@dataclass
class BatchSummary:
    processed: int
    generated: int

    @property
    def message(self) -> str:
        return f"Procesadas {self.processed} URLs. Se generaron {self.generated} schemas."
