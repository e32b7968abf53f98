"""Schema package: title resolution, JSON-LD building, batching & export."""

from backend.schema.batch import number_successes, parse_lines, process_all, summarize
from backend.schema.builder import build_schema
from backend.schema.errors import (
    BatchError,
    BatchTooLargeError,
    EmptyBatchError,
    ExportError,
    InvalidUrlError,
)
from backend.schema.export import build_word_document, renumber
from backend.schema.models import (
    BatchSummary,
    Failure,
    NumberedSchema,
    Outcome,
    SchemaSnippet,
    Success,
)
from backend.schema.resolver import fetch_page_title, resolve_title
from backend.schema.titles import synthesize_title, title_case
from backend.schema.urls import is_valid_url, require_valid_url

__all__ = [
    "process_all",
    "parse_lines",
    "number_successes",
    "summarize",
    "build_schema",
    "build_word_document",
    "renumber",
    "fetch_page_title",
    "resolve_title",
    "synthesize_title",
    "title_case",
    "is_valid_url",
    "require_valid_url",
    "BatchError",
    "BatchTooLargeError",
    "EmptyBatchError",
    "ExportError",
    "InvalidUrlError",
    "BatchSummary",
    "Failure",
    "NumberedSchema",
    "Outcome",
    "SchemaSnippet",
    "Success",
]
