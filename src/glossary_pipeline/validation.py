"""Validation helpers for reference sources and resolved glossary lists."""

from __future__ import annotations

from collections import Counter
from typing import Any, Sequence

from glossary_pipeline.config import GLOSS_FIELD
from glossary_pipeline.models import GlossRecord

PREVIEW_LIMIT = 25


def _raise_with_preview(label: str, errors: list[str]) -> None:
    preview = "\n".join(f"- {item}" for item in errors[:PREVIEW_LIMIT])
    rest = len(errors) - min(PREVIEW_LIMIT, len(errors))
    more = f"\n- ... and {rest} more" if rest > 0 else ""
    raise ValueError(f"{label} validation failed with {len(errors)} errors:\n{preview}{more}")


def validate_source_records(records: Sequence[Any]) -> None:
    """Validate raw reference records before they are indexed.

    Args:
        records: Decoded JSON values from a glossary source.

    Raises:
        ValueError: If a record is not an object or has no string ``gloss``.
    """

    errors: list[str] = []
    for idx, record in enumerate(records, start=1):
        if not isinstance(record, dict):
            errors.append(f"Record {idx}: expected an object, got {type(record).__name__}")
            continue
        gloss = record.get(GLOSS_FIELD)
        if not isinstance(gloss, str):
            errors.append(f"Record {idx}: missing or non-string gloss {gloss!r}")

    if errors:
        _raise_with_preview("Glossary source", errors)


def validate_unique_glosses(records: Sequence[GlossRecord]) -> None:
    """Check that a resolved glossary list holds each gloss once.

    Args:
        records: Resolved gloss records.

    Raises:
        ValueError: If any gloss occurs more than once.
    """

    counts = Counter(record.gloss for record in records)
    errors = [
        f"Gloss '{gloss}' occurs {count} times" for gloss, count in counts.items() if count > 1
    ]
    if errors:
        _raise_with_preview("Resolved glossary", errors)

