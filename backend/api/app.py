"""FastAPI application factory.

Routers
-------
All endpoint groups are mounted under their respective path prefix:

    /schemas   batch generation, single rebuilds, title lookup, Word export
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.api.routers import schemas as schemas_router


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title="Schema LD API",
        description=(
            "Generates JSON-LD EducationalOrganization snippets for lists of "
            "page URLs, using each page's real <title> when it can be fetched "
            "and a URL-derived title otherwise, and exports them as a Word "
            "document."
        ),
        version="0.1.0",
    )

    # Allow browser frontends on any origin (tighten for production).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(schemas_router.router, prefix="/schemas", tags=["schemas"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn backend.api.app:app --reload
app = create_app()
