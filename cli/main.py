"""Schema LD CLI: entry-point for all backend operations.

Usage:
    python cli/main.py --help

Commands:
    generate  → resolve titles and build JSON-LD for a list of URLs
    build     → rebuild the snippet for one URL with a given title
    title     → print the resolved title of one URL
    serve     → run the HTTP API
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from backend.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from typing import Optional

import typer

from backend.config import settings
from backend.schema.batch import number_successes, process_all, summarize
from backend.schema.builder import build_schema
from backend.schema.errors import BatchError, ExportError, InvalidUrlError
from backend.schema.export import build_word_document
from backend.schema.resolver import resolve_title
from backend.schema.urls import require_valid_url
from cli.rendering import render_outcomes

app = typer.Typer(
    name="schema-ld",
    help="Generate JSON-LD EducationalOrganization snippets for page URLs.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at INFO level."),
) -> None:
    """Configure logging before any command runs."""
    level = logging.INFO if verbose else settings.log_level.upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _require_url(url: str) -> None:
    try:
        require_valid_url(url)
    except InvalidUrlError as exc:
        typer.echo(f"❌ {exc}")
        raise typer.Exit(code=1)


@app.command("generate")
def generate(
    source: Optional[Path] = typer.Argument(
        None, help="File with one URL per line (reads stdin when omitted)."
    ),
    export: Optional[Path] = typer.Option(
        None, "--export", help="Also write every schema to this Word document."
    ),
) -> None:
    """Build a schema for every URL, in input order."""
    text = source.read_text(encoding="utf-8") if source else sys.stdin.read()

    try:
        outcomes = process_all(text)
    except BatchError as exc:
        typer.echo(f"❌ {exc}")
        raise typer.Exit(code=1)

    numbered = number_successes(outcomes)
    typer.echo(render_outcomes(outcomes, numbered))
    typer.echo("")
    typer.echo(summarize(outcomes).message)

    if export is not None:
        try:
            document = build_word_document(numbered)
        except ExportError as exc:
            typer.echo(f"❌ {exc}")
            raise typer.Exit(code=1)
        export.write_text(document, encoding="utf-8")
        typer.echo(f"✅ Exported {len(numbered)} schemas to {export}")


@app.command("build")
def build(
    url: str = typer.Option(..., help="Page URL."),
    title: str = typer.Option(..., help="Title to use as alternateName."),
) -> None:
    """Print the JSON-LD snippet for a URL and an explicit title."""
    _require_url(url)
    typer.echo(build_schema(url, title).snippet)


@app.command("title")
def title(
    url: str = typer.Option(..., help="Page URL."),
) -> None:
    """Print the page's title, or the URL-derived one if it cannot be fetched."""
    _require_url(url)
    typer.echo(resolve_title(url))


@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", help="Bind address."),
    port: int = typer.Option(8000, help="Bind port."),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run("backend.api.app:app", host=host, port=port)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
