"""Batch driver: raw input lines in, one outcome per surviving line out.

Lines are trimmed and blank lines dropped.  The batch is rejected outright
if nothing survives or more than ``settings.max_batch_size`` lines do.
Each remaining line is validated on its own; an invalid URL becomes a
:class:`Failure` and processing continues with the next line.

Fetches run sequentially unless ``settings.max_concurrent_fetches`` is
greater than one, in which case they are fanned out to a thread pool.
Either way the returned outcomes follow input order.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Sequence, Union

from backend.config import settings
from backend.schema.builder import build_schema
from backend.schema.errors import BatchTooLargeError, EmptyBatchError, InvalidUrlError
from backend.schema.models import (
    BatchSummary,
    Failure,
    NumberedSchema,
    Outcome,
    Success,
)
from backend.schema.resolver import resolve_title
from backend.schema.urls import require_valid_url

logger = logging.getLogger(__name__)


def parse_lines(raw: Union[str, Iterable[str]]) -> List[str]:
    """Split *raw* into trimmed, non-empty lines.

    *raw* may be a block of text (split on newlines) or an iterable of lines.
    """
    lines = raw.split("\n") if isinstance(raw, str) else raw
    return [stripped for stripped in (line.strip() for line in lines) if stripped]


def check_batch(lines: Sequence[str]) -> None:
    """Raise a :class:`~backend.schema.errors.BatchError` if *lines* cannot run."""
    if not lines:
        raise EmptyBatchError()
    limit = settings.max_batch_size
    if len(lines) > limit:
        raise BatchTooLargeError(len(lines), limit)


def process_line(line: str) -> Outcome:
    """Validate, resolve and build a single line."""
    try:
        require_valid_url(line)
    except InvalidUrlError as exc:
        logger.info("Rejected invalid URL %r", line)
        return Failure(line=line, reason=str(exc))

    title = resolve_title(line)
    schema = build_schema(line, title)
    return Success(url=line, title=title, record=schema.record, snippet=schema.snippet)


def process_all(
    raw: Union[str, Iterable[str]],
    max_workers: Optional[int] = None,
) -> List[Outcome]:
    """Process every URL line in *raw* and return outcomes in input order.

    Raises:
        EmptyBatchError: If no non-blank line remains.
        BatchTooLargeError: If more lines remain than the configured limit.
    """
    lines = parse_lines(raw)
    check_batch(lines)

    workers = max_workers or settings.max_concurrent_fetches
    logger.info("Processing %d URLs (workers=%d)", len(lines), workers)

    if workers <= 1:
        outcomes = [process_line(line) for line in lines]
    else:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            outcomes = list(pool.map(process_line, lines))

    logger.info("%s", summarize(outcomes).message)
    return outcomes


def number_successes(outcomes: Iterable[Outcome]) -> List[NumberedSchema]:
    """Number the successful outcomes 1..n, skipping failures."""
    successes = [o for o in outcomes if isinstance(o, Success)]
    return [
        NumberedSchema(number=i, url=s.url, title=s.title, snippet=s.snippet)
        for i, s in enumerate(successes, start=1)
    ]


def summarize(outcomes: Sequence[Outcome]) -> BatchSummary:
    generated = sum(1 for o in outcomes if isinstance(o, Success))
    return BatchSummary(processed=len(outcomes), generated=generated)
