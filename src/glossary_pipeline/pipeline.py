"""Top-level orchestration for the generate and fill workflows."""

from __future__ import annotations

from glossary_pipeline.glossary.repository import Glossary
from glossary_pipeline.models import FillResult, GenerateResult, JsonValue
from glossary_pipeline.reporting.unmatched import summarize_document, summarize_paragraphs
from glossary_pipeline.stages.annotate import annotate_document, build_glossary
from glossary_pipeline.validation import validate_unique_glosses


def run_generate(
    document: JsonValue,
    glossary: Glossary,
    include_symbols: bool = True,
) -> GenerateResult:
    """Build a document-wide glossary and its unmatched summary.

    Args:
        document: Annotated input document.
        glossary: Dictionary built from the reference source.
        include_symbols: Whether pure-symbol glosses count as unmatched.

    Returns:
        ``GenerateResult`` with the sorted glossary and report.
    """

    records = build_glossary(document, glossary)
    validate_unique_glosses(records)

    return GenerateResult(
        glossary=tuple(records),
        report=summarize_document(records, include_symbols=include_symbols),
    )


def run_fill(
    document: JsonValue,
    glossary: Glossary,
    include_symbols: bool = True,
) -> FillResult:
    """Fill every paragraph's glossary field and summarize unmatched glosses.

    Args:
        document: Structured input document.
        glossary: Dictionary built from a prebuilt glossary.
        include_symbols: Whether pure-symbol glosses count as unmatched.

    Returns:
        ``FillResult`` with the updated document and per-paragraph reports.

    Raises:
        ValueError: If a paragraph list repeats a gloss.
    """

    updated, paragraphs = annotate_document(document, glossary)
    for paragraph in paragraphs:
        validate_unique_glosses(paragraph.records)

    return FillResult(
        document=updated,
        reports=tuple(summarize_paragraphs(paragraphs, include_symbols=include_symbols)),
    )

