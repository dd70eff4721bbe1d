"""
Word normalization for dictionary entries.

Turns raw identifiers and tag-like tokens into the words stored in the
dictionary, according to a NormalizeMode.
"""

import re

from models import NormalizeMode

# POSIX [:alpha:] is ASCII-only.
LEADING_ALPHA_RE = re.compile(r"^([A-Za-z]+)")


def normalize(raw: str, mode: NormalizeMode = NormalizeMode.STRICT) -> list[str]:
    """
    Normalize a raw token into zero or more dictionary words.

    Examples (strict):
        "uint8" -> ["uint"]
        "Int64" -> ["int"]
        "DoThing" -> ["dothing"]
        "_private", "8bit" -> []

    Args:
        raw: An identifier-like or tag-like token.
        mode: STRICT keeps the leading run of ASCII letters, lowercased.
            VERBATIM keeps the token unchanged.

    Returns:
        list[str]: The words to record. Empty when nothing survives.
    """
    if not raw:
        return []

    if mode == NormalizeMode.VERBATIM:
        return [raw]

    match = LEADING_ALPHA_RE.match(raw)
    if match is None:
        return []
    return [match.group(1).lower()]


def normalize_all(
    tokens, mode: NormalizeMode = NormalizeMode.STRICT
) -> list[str]:
    """Normalize every token of an iterable, flattening the results."""
    words: list[str] = []
    for token in tokens:
        words.extend(normalize(token, mode))
    return words
