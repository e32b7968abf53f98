"""Plain-text rendering of batch outcomes for the CLI."""

from __future__ import annotations

from typing import List, Sequence

from backend.schema.models import Failure, NumberedSchema, Outcome, Success


def render_item(item: NumberedSchema) -> str:
    """Render one generated schema as a labelled block."""
    return "\n".join(
        [
            item.label,
            f"URL: {item.url}",
            f"Título: {item.title}",
            item.snippet,
        ]
    )


def render_failure(failure: Failure) -> str:
    return f"✗ {failure.reason}"


def render_outcomes(outcomes: Sequence[Outcome], numbered: Sequence[NumberedSchema]) -> str:
    """Render *outcomes* in input order, using *numbered* for the successes.

    *numbered* must be ``number_successes(outcomes)``.
    """
    items = iter(numbered)
    blocks: List[str] = []
    for outcome in outcomes:
        if isinstance(outcome, Success):
            blocks.append(render_item(next(items)))
        else:
            blocks.append(render_failure(outcome))
    return "\n\n".join(blocks)
