"""Schema endpoints.

Routes
------
POST /schemas           Body: {"lines": ["https://...", ...]}   → process_all
POST /schemas/build     Body: {"url": "...", "title": "..."}    → build_schema
GET  /schemas/title?url=<url>                                   → resolve_title
POST /schemas/export    Body: {"items": [{"url", "title"}]}     → Word document
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel

from backend.config import settings
from backend.schema.batch import number_successes, process_all, summarize
from backend.schema.builder import build_schema
from backend.schema.errors import BatchError, ExportError, InvalidUrlError
from backend.schema.export import WORD_MEDIA_TYPE, build_word_document, renumber
from backend.schema.models import Success
from backend.schema.resolver import resolve_title
from backend.schema.urls import require_valid_url

router = APIRouter()


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class GenerateRequest(BaseModel):
    lines: list[str]


class BuildRequest(BaseModel):
    url: str
    title: str


class ExportItem(BaseModel):
    url: str
    title: str


class ExportRequest(BaseModel):
    items: list[ExportItem]


class GenerateResponse(BaseModel):
    processed: int
    generated: int
    summary: str
    results: list[dict[str, Any]]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _require_url(url: str) -> None:
    try:
        require_valid_url(url)
    except InvalidUrlError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


def _item_dict(number: int, url: str, title: str) -> dict[str, Any]:
    schema = build_schema(url, title)
    return {
        "status": "ok",
        "number": number,
        "url": url,
        "title": title,
        "snippet": schema.snippet,
        "schema": schema.record,
    }


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("", response_model=GenerateResponse)
def generate(body: GenerateRequest) -> dict[str, Any]:
    """Resolve titles and build schemas for every URL line, in input order.

    Invalid lines appear as ``{"status": "error"}`` entries; they do not stop
    the batch.
    """
    try:
        outcomes = process_all(body.lines)
    except BatchError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    numbered = iter(number_successes(outcomes))
    results: list[dict[str, Any]] = []
    for outcome in outcomes:
        if isinstance(outcome, Success):
            results.append(
                {
                    "status": "ok",
                    "number": next(numbered).number,
                    "url": outcome.url,
                    "title": outcome.title,
                    "snippet": outcome.snippet,
                    "schema": outcome.record,
                }
            )
        else:
            results.append(
                {"status": "error", "line": outcome.line, "reason": outcome.reason}
            )

    summary = summarize(outcomes)
    return {
        "processed": summary.processed,
        "generated": summary.generated,
        "summary": summary.message,
        "results": results,
    }


@router.post("/build")
def build(body: BuildRequest, number: int = 1) -> dict[str, Any]:
    """Rebuild a single schema after its title was edited."""
    _require_url(body.url)
    return _item_dict(number, body.url, body.title)


@router.get("/title")
def title(url: str) -> dict[str, str]:
    """Return the page title for *url*, falling back to a URL-derived one."""
    _require_url(url)
    return {"url": url, "title": resolve_title(url)}


@router.post("/export")
def export(body: ExportRequest) -> Response:
    """Download every item as a single Word-compatible document."""
    for item in body.items:
        _require_url(item.url)
    try:
        document = build_word_document(renumber((i.url, i.title) for i in body.items))
    except ExportError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return Response(
        content=document,
        media_type=f"{WORD_MEDIA_TYPE}; charset=utf-8",
        headers={
            "Content-Disposition": f'attachment; filename="{settings.export_filename}"'
        },
    )
