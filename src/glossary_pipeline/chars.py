"""Unicode character classes used to tell symbol glosses from structure."""

from __future__ import annotations

import unicodedata

BRACKET_CATEGORIES = {"Ps", "Pe"}
PUNCT_OR_SYMBOL_MAJOR = {"P", "S"}


def is_bracket(ch: str) -> bool:
    """Return whether ``ch`` is an opening or closing bracket (``Ps``/``Pe``).

    Args:
        ch: Single character.

    Returns:
        ``True`` for characters such as ``(``, ``]`` or ``「``.
    """

    return unicodedata.category(ch) in BRACKET_CATEGORIES


def is_punct_or_symbol(ch: str) -> bool:
    """Return whether ``ch`` belongs to any punctuation (``P*``) or symbol (``S*``) category."""

    return unicodedata.category(ch)[0] in PUNCT_OR_SYMBOL_MAJOR


def is_pure_symbol(text: str) -> bool:
    """Return whether ``text`` consists only of punctuation/symbol characters.

    Brackets count as punctuation here. The empty string is vacuously pure.

    Args:
        text: Gloss string.

    Returns:
        ``True`` when removing every ``P*``/``S*`` character leaves nothing.
    """

    return all(is_punct_or_symbol(ch) for ch in text)
