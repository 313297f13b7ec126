"""JSON read/write helpers for documents and glossary artifacts."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TextIO

from glossary_pipeline.models import JsonValue

JSON_INDENT = 2


def read_json(path: Path) -> JsonValue:
    """Decode one JSON document from ``path``.

    Raises:
        json.JSONDecodeError: If the file is not valid JSON.
    """

    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def write_json(value: JsonValue, stream: TextIO) -> None:
    """Write ``value`` as indented JSON followed by a newline.

    Key order is preserved and non-ASCII text is written unescaped.

    Args:
        value: JSON-compatible value.
        stream: Destination text stream, usually ``sys.stdout``.
    """

    stream.write(json.dumps(value, ensure_ascii=False, indent=JSON_INDENT))
    stream.write("\n")
