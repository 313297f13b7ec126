"""Annotator: build a document glossary or fill per-paragraph glossary fields."""

from __future__ import annotations

from dataclasses import dataclass, field

from glossary_pipeline.config import ANNOTATION_PREFIX, TARGET_FIELD
from glossary_pipeline.glossary.repository import Glossary, resolve_tokens
from glossary_pipeline.models import GlossRecord, JsonValue
from glossary_pipeline.stages.tokenize import detect_tokens


def build_glossary(
    document: JsonValue,
    glossary: Glossary,
    prefix: str = ANNOTATION_PREFIX,
) -> list[GlossRecord]:
    """Resolve every token of the whole document into a flat glossary.

    Args:
        document: Annotated input document.
        glossary: Reference dictionary.
        prefix: Key prefix marking annotation fields.

    Returns:
        Gloss-unique records sorted by gloss.
    """

    records = resolve_tokens(detect_tokens(document, prefix), glossary)
    return sorted(records, key=lambda record: record.gloss)


@dataclass(frozen=True)
class AnnotatedParagraph:
    """One paragraph touched during a fill pass.

    Attributes:
        node: The rewritten paragraph object.
        records: Records written into its target field.
    """

    node: dict
    records: tuple[GlossRecord, ...]


@dataclass
class _Annotator:
    """Recursive paragraph-scoped rewriter.

    Paragraphs are recorded in pre-order as they are rewritten.
    """

    glossary: Glossary
    prefix: str
    target_field: str
    paragraphs: list[AnnotatedParagraph] = field(default_factory=list)

    def visit(self, node: JsonValue) -> JsonValue:
        if isinstance(node, dict):
            if self.target_field in node:
                return self._annotate_paragraph(node)
            return {key: self.visit(value) for key, value in node.items()}
        if isinstance(node, list):
            return [self.visit(item) for item in node]
        return node

    def _annotate_paragraph(self, node: dict) -> dict:
        records = resolve_tokens(detect_tokens(node, self.prefix), self.glossary)
        updated = dict(node)
        updated[self.target_field] = [record.to_dict() for record in records]
        self.paragraphs.append(AnnotatedParagraph(node=updated, records=tuple(records)))
        return updated


def annotate_document(
    document: JsonValue,
    glossary: Glossary,
    prefix: str = ANNOTATION_PREFIX,
    target_field: str = TARGET_FIELD,
) -> tuple[JsonValue, list[AnnotatedParagraph]]:
    """Replace the target field of every paragraph object with its resolved glosses.

    An object carrying ``target_field`` is one paragraph: its whole subtree is
    tokenized together and nothing below it is annotated separately. Objects
    without the field are descended into but never gain one. The input
    document is not mutated.

    Args:
        document: Structured input document.
        glossary: Prebuilt dictionary.
        prefix: Key prefix marking annotation fields.
        target_field: Key marking paragraph objects.

    Returns:
        Tuple of ``(updated_document, paragraphs)`` where ``paragraphs`` lists
        annotated objects in document order.
    """

    annotator = _Annotator(glossary=glossary, prefix=prefix, target_field=target_field)
    updated = annotator.visit(document)
    return updated, annotator.paragraphs
