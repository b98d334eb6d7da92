"""Shared text normalization utilities.

This module provides the generic normalization used for both catalog
entries and incoming queries, plus the word-boundary helper the matcher
and the prefix index share.
"""

import re
import unicodedata

_WHITESPACE_RE = re.compile(r"\s+")


def strip_diacritics(s: str) -> str:
    """Remove combining marks after NFKD decomposition.

    Unlike an ASCII transliteration this keeps letters that have no
    decomposition (Cyrillic, CJK, "ł"), so those names stay matchable.

    Examples:
        >>> strip_diacritics("Montréal")
        'Montreal'

        >>> strip_diacritics("São Paulo")
        'Sao Paulo'
    """
    decomposed = unicodedata.normalize("NFKD", s)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize_name(s: str) -> str:
    """Generic normalization for matching.

    Transformations:
      1. Unicode normalization (NFKD) and combining-mark removal
      2. Lowercase
      3. Collapse whitespace
      4. Trim

    Args:
        s: Raw text to normalize

    Returns:
        Normalized string for matching

    Examples:
        >>> normalize_name("  Québec   City ")
        'quebec city'

        >>> normalize_name("MONTRÉAL")
        'montreal'
    """
    if not s:
        return ""

    s = strip_diacritics(s)
    s = s.lower()
    s = _WHITESPACE_RE.sub(" ", s).strip()

    return s


def word_starts(s: str) -> list[int]:
    """Return the offsets in ``s`` where a word begins.

    Offset 0 is always a word start for non-empty strings. Any other offset
    is a word start when the preceding character is not alphanumeric and
    the character itself is.

    Examples:
        >>> word_starts("saint-jean-sur-richelieu")
        [0, 6, 11, 15]

        >>> word_starts("st. john's")
        [0, 4, 9]
    """
    if not s:
        return []

    starts = [0]
    for i in range(1, len(s)):
        if s[i].isalnum() and not s[i - 1].isalnum():
            starts.append(i)
    return starts


__all__ = [
    "strip_diacritics",
    "normalize_name",
    "word_starts",
]
