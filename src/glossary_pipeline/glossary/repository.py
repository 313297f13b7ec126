"""Glossary dictionary construction and token resolution."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Sequence

from glossary_pipeline.config import GLOSS_FIELD, GRAMMATICAL_FUNCTION_FIELDS, SOURCE_GLOSSES_KEY
from glossary_pipeline.io.json_io import read_json
from glossary_pipeline.models import GlossRecord, JsonValue
from glossary_pipeline.validation import validate_source_records

Glossary = Mapping[str, GlossRecord]


def _optional(value: Any) -> Any:
    """Map ``null`` and ``false`` to ``None``; keep every other value."""

    if value is None or value is False:
        return None
    return value


def source_records(source: JsonValue) -> list[Any]:
    """Return the record list held by a reference source.

    Args:
        source: A flat list of records, an object wrapping a ``glosses`` list,
            or ``None`` for an empty source.

    Returns:
        Raw records in source order.

    Raises:
        ValueError: If ``source`` has neither supported shape.
    """

    if source is None:
        return []
    if isinstance(source, list):
        return list(source)
    if isinstance(source, dict):
        records = source.get(SOURCE_GLOSSES_KEY)
        if records is None:
            return []
        if isinstance(records, list):
            return list(records)
        raise ValueError(
            f"Glossary source '{SOURCE_GLOSSES_KEY}' must be a list, got {type(records).__name__}"
        )
    raise ValueError(f"Unsupported glossary source of type {type(source).__name__}")


def record_from_source(raw: Mapping[str, Any]) -> GlossRecord:
    """Re-key one source record to the canonical four-field shape.

    Extra source fields are dropped; missing ones become ``None``.
    """

    functions = {name: _optional(raw.get(name)) for name in GRAMMATICAL_FUNCTION_FIELDS}
    return GlossRecord(gloss=raw[GLOSS_FIELD], **functions)


def build_dictionary(source: JsonValue) -> Glossary:
    """Index a reference source by gloss.

    When a gloss repeats in the source, the last record wins.

    Args:
        source: Reference glossary in either supported shape.

    Returns:
        Read-only mapping of gloss to canonical record.

    Raises:
        ValueError: If the source shape or any record is malformed.
    """

    records = source_records(source)
    validate_source_records(records)

    mapping: dict[str, GlossRecord] = {}
    for raw in records:
        record = record_from_source(raw)
        mapping[record.gloss] = record
    return MappingProxyType(mapping)


def resolve(token: str, glossary: Glossary) -> GlossRecord:
    """Look up ``token`` by exact string equality.

    Args:
        token: Detected gloss token.
        glossary: Dictionary from :func:`build_dictionary`.

    Returns:
        The stored record, or a null-valued record for unknown tokens.
    """

    record = glossary.get(token)
    if record is None:
        return GlossRecord.unmatched(token)
    return record


def dedupe_by_gloss(records: Iterable[GlossRecord]) -> list[GlossRecord]:
    """Drop records whose gloss was already seen, keeping the first one in place."""

    seen: set[str] = set()
    unique: list[GlossRecord] = []
    for record in records:
        if record.gloss in seen:
            continue
        seen.add(record.gloss)
        unique.append(record)
    return unique


def resolve_tokens(tokens: Sequence[str], glossary: Glossary) -> list[GlossRecord]:
    """Resolve every token and dedupe the result by gloss, first seen wins.

    Args:
        tokens: Detected tokens for one scope.
        glossary: Dictionary from :func:`build_dictionary`.

    Returns:
        One record per distinct token, in token order.
    """

    return dedupe_by_gloss(resolve(token, glossary) for token in tokens)


@dataclass(frozen=True)
class GlossaryRepository:
    """Read-only glossary loaded from a JSON file on first use.

    The file may be a generated glossary (flat record list) or a reference
    source wrapping its records in ``glosses``. Instances are path-scoped and
    deterministic.
    """

    path: Path

    @cached_property
    def glossary(self) -> Glossary:
        """Load and cache the gloss-indexed dictionary.

        Returns:
            Read-only mapping of gloss to canonical record.

        Raises:
            FileNotFoundError: If the configured path does not exist.
        """

        if not self.path.exists():
            raise FileNotFoundError(f"Glossary file not found: {self.path}")
        return build_dictionary(read_json(self.path))
