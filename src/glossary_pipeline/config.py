"""Field names, default paths and run options for the glossary workflows."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ANNOTATION_PREFIX = "gloss-morph-"
TARGET_FIELD = "glossary-abbreviations"
ID_FIELD = "id"
SOURCE_GLOSSES_KEY = "glosses"

GLOSS_FIELD = "gloss"
GRAMMATICAL_FUNCTION_FIELDS = (
    "grammatical_function_en",
    "grammatical_function_ja",
    "grammatical_function_zh",
)

DEFAULT_SOURCE_PATH = Path("..") / "sources" / "zisk-gloss-conventions-2024.json"
DEFAULT_GLOSSARY_PATH = Path("..") / "glossary.json"


@dataclass(frozen=True)
class RunOptions:
    """Logging switches shared by both command-line workflows.

    Attributes:
        quiet: Suppress detail lines, and everything when nothing is unmatched.
        verbose: Always write summary lines; wins over ``quiet``.
        log_symbols: Count pure-symbol glosses as unmatched in logs.
    """

    quiet: bool = False
    verbose: bool = False
    log_symbols: bool = True


def _env_path(name: str, default: Path) -> Path:
    value = os.getenv(name, "").strip()
    return Path(value) if value else default


def default_source_path() -> Path:
    """Return the reference source used by ``generate-glossary`` when none is given."""

    return _env_path("GLOSSARY_SOURCE_PATH", DEFAULT_SOURCE_PATH)


def default_glossary_path() -> Path:
    """Return the prebuilt glossary used by ``fill-glossary`` when none is given."""

    return _env_path("GLOSSARY_PATH", DEFAULT_GLOSSARY_PATH)
