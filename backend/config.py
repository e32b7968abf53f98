"""Centralised settings for the schema generator backend.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # CORS relay used to fetch page HTML
    # ------------------------------------------------------------------
    relay_url: str = field(
        default_factory=lambda: os.environ.get(
            "RELAY_URL", "https://api.allorigins.win/get"
        )
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "5.0"))
    )

    # ------------------------------------------------------------------
    # Batch processing
    # ------------------------------------------------------------------
    max_batch_size: int = field(
        default_factory=lambda: int(os.environ.get("MAX_BATCH_SIZE", "100"))
    )
    max_concurrent_fetches: int = field(
        default_factory=lambda: int(os.environ.get("MAX_CONCURRENT_FETCHES", "1"))
    )

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------
    export_filename: str = field(
        default_factory=lambda: os.environ.get("EXPORT_FILENAME", "schemas_json_ld.doc")
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "WARNING")
    )


# Module-level singleton, import this everywhere:
#   from backend.config import settings
settings = Settings()
