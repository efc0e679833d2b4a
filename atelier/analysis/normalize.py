"""Pure string normalization for name similarity.

Slugs and storage paths are never normalized: they are compared verbatim.
"""

import re
import unicodedata
from typing import Optional

_DISALLOWED = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize(text: str) -> str:
    """Fold a display name down to its accent/punctuation-free form.

    Steps: NFD decomposition, drop combining marks, lowercase, drop
    anything outside ``[a-z0-9\\s]``, collapse whitespace, trim.

    Args:
        text: Any string (may be empty)

    Returns:
        Normalized string, empty for empty input
    """
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    folded = _DISALLOWED.sub("", stripped.lower())
    return _WHITESPACE.sub(" ", folded).strip()


def exact_key(text: Optional[str]) -> Optional[str]:
    """Key for exact name matching: trimmed and lowercased, accents kept.

    Returns None for missing or blank text so the record is left out of
    name grouping.
    """
    if text is None:
        return None
    key = text.strip().lower()
    return key or None


def normalized_key(text: Optional[str]) -> Optional[str]:
    """Key for fuzzy name matching, None when nothing survives normalization."""
    if text is None:
        return None
    return normalize(text) or None
