"""Unmatched-gloss accounting per document and per paragraph."""

from __future__ import annotations

from typing import Iterable, Sequence

from glossary_pipeline.chars import is_pure_symbol
from glossary_pipeline.config import ID_FIELD
from glossary_pipeline.models import DocumentReport, GlossRecord, ParagraphReport
from glossary_pipeline.stages.annotate import AnnotatedParagraph


def unmatched_glosses(records: Iterable[GlossRecord], include_symbols: bool = True) -> list[str]:
    """Return glosses of records with no grammatical function in any language.

    Args:
        records: Resolved records for one scope.
        include_symbols: When false, pure punctuation/symbol glosses such as
            ``-`` or ``=`` are left out.

    Returns:
        Unmatched gloss strings in record order.
    """

    unmatched = [record for record in records if record.is_unmatched]
    if not include_symbols:
        unmatched = [record for record in unmatched if not is_pure_symbol(record.gloss)]
    return [record.gloss for record in unmatched]


def summarize_document(
    records: Sequence[GlossRecord],
    include_symbols: bool = True,
) -> DocumentReport:
    """Build the document-wide summary for a generated glossary."""

    return DocumentReport(
        total=len(records),
        unmatched=tuple(unmatched_glosses(records, include_symbols)),
    )


def summarize_paragraphs(
    paragraphs: Sequence[AnnotatedParagraph],
    include_symbols: bool = True,
    id_field: str = ID_FIELD,
) -> list[ParagraphReport]:
    """Build one report per annotated paragraph.

    Args:
        paragraphs: Paragraphs in document order from a fill pass.
        include_symbols: Whether pure-symbol glosses count as unmatched.
        id_field: Key holding the paragraph identifier.

    Returns:
        Reports whose ``position`` is the paragraph's index in ``paragraphs``.
    """

    return [
        ParagraphReport(
            id=paragraph.node.get(id_field),
            position=position,
            unmatched=tuple(unmatched_glosses(paragraph.records, include_symbols)),
        )
        for position, paragraph in enumerate(paragraphs)
    ]
