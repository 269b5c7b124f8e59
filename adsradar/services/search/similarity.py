"""Accent- and case-insensitive string similarity (Dice coefficient over bigrams)."""

from __future__ import annotations

import unicodedata
from collections import Counter


def strip_accents(value: str) -> str:
    """Remove combining marks after canonical decomposition."""
    decomposed = unicodedata.normalize("NFD", value)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize_text(value: str) -> str:
    """Lowercase and strip accents: the comparison form for names."""
    return strip_accents(value.lower())


def bigrams(value: str) -> list[str]:
    """Overlapping two-character substrings of the normalized value, in order."""
    normalized = normalize_text(value)
    return [normalized[i : i + 2] for i in range(len(normalized) - 1)]


def similarity(a: str, b: str) -> float:
    """Return the Dice coefficient of the bigram multisets of `a` and `b`.

    Repeated bigrams count with multiplicity: a bigram occurring twice in
    `a` and three times in `b` contributes two hits. Two strings without
    any bigram score 0.
    """
    pairs_a = bigrams(a)
    pairs_b = bigrams(b)
    union = len(pairs_a) + len(pairs_b)
    if union == 0:
        return 0.0

    hits = sum((Counter(pairs_a) & Counter(pairs_b)).values())
    return (2.0 * hits) / union
