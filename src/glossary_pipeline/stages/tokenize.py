"""Tokenizer: extract gloss codes and symbols from annotation fields."""

from __future__ import annotations

import re
from typing import Iterator

from glossary_pipeline.chars import is_bracket, is_punct_or_symbol
from glossary_pipeline.config import ANNOTATION_PREFIX
from glossary_pipeline.models import JsonValue, render_json_value

CODE_SEPARATOR_RE = re.compile(r"[^A-Za-z0-9]+")
CODE_RE = re.compile(r"[A-Z0-9]+")
UPPERCASE_RE = re.compile(r"[A-Z]")
MIN_CODE_UPPERCASE = 2


def iter_annotation_values(
    scope: JsonValue,
    prefix: str = ANNOTATION_PREFIX,
) -> Iterator[JsonValue]:
    """Yield values of annotation fields anywhere in ``scope``.

    Objects are visited in pre-order: an object's own annotation fields come
    before anything nested inside its values.

    Args:
        scope: Document or sub-document.
        prefix: Key prefix marking annotation fields.

    Yields:
        Raw annotation values, not yet coerced to text.
    """

    stack: list[JsonValue] = [scope]
    while stack:
        node = stack.pop()
        if isinstance(node, dict):
            for key, value in node.items():
                if key.startswith(prefix):
                    yield value
            stack.extend(reversed(list(node.values())))
        elif isinstance(node, list):
            stack.extend(reversed(node))


def collect_annotation_text(scope: JsonValue, prefix: str = ANNOTATION_PREFIX) -> str:
    """Join every annotation value in ``scope`` into one space-separated blob."""

    return " ".join(render_json_value(value) for value in iter_annotation_values(scope, prefix))


def is_code(piece: str) -> bool:
    """Return whether ``piece`` is a gloss code such as ``ADN``, ``AOR2`` or ``1SG``.

    A code uses only uppercase ASCII letters and digits and has at least two
    uppercase letters, which rules out ``A1``, ``3`` and lowercase words.
    """

    if not CODE_RE.fullmatch(piece):
        return False
    return len(UPPERCASE_RE.findall(piece)) >= MIN_CODE_UPPERCASE


def extract_codes(text: str) -> list[str]:
    """Split ``text`` on non-alphanumeric runs and keep the pieces that are codes.

    Args:
        text: Annotation blob.

    Returns:
        Codes in order of appearance, duplicates included.
    """

    return [piece for piece in CODE_SEPARATOR_RE.sub(" ", text).split(" ") if is_code(piece)]


def extract_symbols(text: str) -> list[str]:
    """Return every punctuation/symbol character of ``text`` except brackets.

    Args:
        text: Annotation blob.

    Returns:
        Single-character symbol tokens in order of appearance, duplicates included.
    """

    return [ch for ch in text if is_punct_or_symbol(ch) and not is_bracket(ch)]


def detect_tokens(scope: JsonValue, prefix: str = ANNOTATION_PREFIX) -> list[str]:
    """Detect the sorted, unique gloss tokens used in ``scope``.

    Codes and symbols are disjoint by construction: codes hold only ASCII
    letters and digits, symbols are single ``P*``/``S*`` characters. A hyphen
    inside ``run-PST`` therefore yields both ``-`` and ``PST``.

    Args:
        scope: Document, paragraph object, or any JSON value.
        prefix: Key prefix marking annotation fields.

    Returns:
        Tokens in ascending code-point order; empty when ``scope`` has no
        annotation fields.
    """

    text = collect_annotation_text(scope, prefix)
    if not text:
        return []
    return sorted(set(extract_codes(text)) | set(extract_symbols(text)))
