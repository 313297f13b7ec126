"""Unit tests for JSON serialization helpers."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from glossary_pipeline.io.json_io import read_json, write_json


def test_write_json_keeps_key_order_and_unicode() -> None:
    stream = io.StringIO()

    write_json({"z": "過去", "a": [], "m": None}, stream)

    assert stream.getvalue() == '{\n  "z": "過去",\n  "a": [],\n  "m": null\n}\n'


def test_read_json_decodes_utf8_file(tmp_path: Path) -> None:
    path = tmp_path / "doc.json"
    path.write_text('{"gloss-morph-1": "見る-PST"}', encoding="utf-8")

    assert read_json(path) == {"gloss-morph-1": "見る-PST"}


def test_read_json_propagates_parse_errors(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text('{"gloss-morph-1": ', encoding="utf-8")

    with pytest.raises(json.JSONDecodeError):
        read_json(path)
