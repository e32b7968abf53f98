"""HTTP layer for the schema generator.

Run it with::

    uvicorn backend.api:app --reload

or ``schema-ld serve``.
"""

from backend.api.app import app

__all__ = ["app"]
