"""Unit tests for gloss token detection."""

from __future__ import annotations

from glossary_pipeline.stages.tokenize import (
    collect_annotation_text,
    detect_tokens,
    extract_codes,
    extract_symbols,
    is_code,
)


def test_is_code_requires_two_uppercase_letters() -> None:
    assert not is_code("A1")
    assert is_code("AB1")
    assert is_code("3PL")
    assert is_code("AOR2")
    assert not is_code("a")
    assert not is_code("Pst")
    assert not is_code("12")
    assert not is_code("")


def test_extract_codes_splits_on_non_alphanumeric_runs() -> None:
    assert extract_codes("go-PST.3SG =ADN run") == ["PST", "3SG", "ADN"]
    assert extract_codes("ÄBC") == ["BC"]


def test_extract_symbols_drops_brackets() -> None:
    assert extract_symbols("(run-PST)=[x]") == ["-", "="]


def test_collect_annotation_text_renders_non_strings_as_compact_json() -> None:
    scope = {
        "gloss-morph-1": "run-PST",
        "gloss-morph-2": 3,
        "other": "IGNORED",
        "words": [{"gloss-morph-1": ["AOR", "1SG"]}],
    }

    assert collect_annotation_text(scope) == 'run-PST 3 ["AOR","1SG"]'


def test_detect_tokens_is_sorted_unique_union_of_codes_and_symbols() -> None:
    document = {
        "paragraphs": [
            {"gloss-morph-1": "run-PST", "gloss-morph-2": "see-PST=ADN"},
            {"gloss-morph-1": "(1SG)", "gloss-morph-2": "AOR2.A1"},
        ]
    }

    tokens = detect_tokens(document)

    assert tokens == ["-", ".", "1SG", "=", "ADN", "AOR2", "PST"]
    assert tokens == sorted(set(tokens))


def test_detect_tokens_never_emits_brackets() -> None:
    tokens = detect_tokens({"gloss-morph-1": "[ADN]（PST）{x}"})

    assert tokens == ["ADN", "PST"]


def test_detect_tokens_returns_empty_for_documents_without_annotations() -> None:
    assert detect_tokens({}) == []
    assert detect_tokens([]) == []
    assert detect_tokens("ADN") == []
    assert detect_tokens({"text": "run-PST"}) == []


def test_detect_tokens_keeps_codes_and_symbols_disjoint() -> None:
    tokens = detect_tokens({"gloss-morph-1": "1SG-ADN~PST.NMLZ"})

    codes = [token for token in tokens if is_code(token)]
    symbols = [token for token in tokens if len(token) == 1 and not token.isalnum()]

    assert set(codes).isdisjoint(symbols)
    assert sorted(codes + symbols) == tokens


def test_detect_tokens_renders_integral_floats_without_exponent() -> None:
    assert collect_annotation_text({"gloss-morph-1": 1e16}) == "10000000000000000"
    assert collect_annotation_text({"gloss-morph-1": [2.0, {"n": 1e20}]}) == (
        '[2,{"n":100000000000000000000}]'
    )
    assert detect_tokens({"gloss-morph-1": 1e16}) == []
    assert detect_tokens({"gloss-morph-1": 0.5}) == ["."]
