"""Data models shared by the tokenizer, resolver, annotator and reporters.

Gloss records and unmatched reports are immutable so that one glossary built at
startup can be consulted by every resolution without defensive copies.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
from typing import Any, Union

JsonValue = Union[dict, list, str, int, float, bool, None]


def _integral_floats_as_ints(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, dict):
        return {key: _integral_floats_as_ints(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_integral_floats_as_ints(item) for item in value]
    return value


def render_json_value(value: Any) -> str:
    """Render a JSON value as text, keeping strings verbatim.

    Integral floats are written as plain integers, so ``1e16`` becomes
    ``10000000000000000`` rather than exponent notation.

    Args:
        value: Any decoded JSON value.

    Returns:
        The string itself, or compact JSON text for every other value.
    """

    if isinstance(value, str):
        return value
    return json.dumps(
        _integral_floats_as_ints(value), ensure_ascii=False, separators=(",", ":")
    )


@dataclass(frozen=True)
class GlossRecord:
    """One glossary entry in the canonical four-field shape.

    A record whose three ``grammatical_function_*`` fields are all ``None`` was
    never found in the reference source and counts as unmatched.
    """

    gloss: str
    grammatical_function_en: Any = None
    grammatical_function_ja: Any = None
    grammatical_function_zh: Any = None

    @classmethod
    def unmatched(cls, gloss: str) -> GlossRecord:
        """Return the null-valued record used for tokens missing from the glossary."""

        return cls(gloss=gloss)

    @property
    def is_unmatched(self) -> bool:
        return (
            self.grammatical_function_en is None
            and self.grammatical_function_ja is None
            and self.grammatical_function_zh is None
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "gloss": self.gloss,
            "grammatical_function_en": self.grammatical_function_en,
            "grammatical_function_ja": self.grammatical_function_ja,
            "grammatical_function_zh": self.grammatical_function_zh,
        }


@dataclass(frozen=True)
class ParagraphReport:
    """Unmatched glosses for one annotated paragraph.

    Attributes:
        id: Raw ``id`` value of the paragraph object, or ``None`` when absent.
        position: 0-based index among all annotated paragraphs, in document order.
        unmatched: Unmatched gloss strings in glossary order.
    """

    id: Any
    position: int
    unmatched: tuple[str, ...] = ()

    @property
    def unmatched_count(self) -> int:
        return len(self.unmatched)

    @property
    def present_id(self) -> Any:
        """Return the paragraph id, treating ``false`` like a missing id."""

        if self.id is False:
            return None
        return self.id

    @property
    def label(self) -> str:
        """Return the paragraph id for log lines, or ``idx:N`` when it has none."""

        if self.present_id is None:
            return f"idx:{self.position}"
        return render_json_value(self.present_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.present_id,
            "unmatched_count": self.unmatched_count,
            "unmatched": list(self.unmatched),
        }


@dataclass(frozen=True)
class DocumentReport:
    """Document-wide unmatched summary produced by glossary generation."""

    total: int
    unmatched: tuple[str, ...] = ()

    @property
    def unmatched_count(self) -> int:
        return len(self.unmatched)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "unmatched_count": self.unmatched_count,
            "unmatched": list(self.unmatched),
        }


@dataclass(frozen=True)
class GenerateResult:
    """Result bundle returned by :func:`glossary_pipeline.pipeline.run_generate`.

    Attributes:
        glossary: Sorted, gloss-unique records for the whole document.
        report: Document-wide unmatched summary.
    """

    glossary: tuple[GlossRecord, ...]
    report: DocumentReport


@dataclass(frozen=True)
class FillResult:
    """Result bundle returned by :func:`glossary_pipeline.pipeline.run_fill`.

    Attributes:
        document: Input document with every target field replaced.
        reports: One report per annotated paragraph, in document order.
    """

    document: JsonValue
    reports: tuple[ParagraphReport, ...]

    @property
    def unmatched_total(self) -> int:
        return sum(report.unmatched_count for report in self.reports)
