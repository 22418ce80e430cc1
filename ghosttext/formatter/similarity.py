"""Edit-distance based string similarity."""
from __future__ import annotations

from rapidfuzz.distance import Levenshtein


def string_similarity(first: str, second: str) -> float:
    """Return ``1 - distance / max(len)`` in ``[0, 1]``; two empty strings are identical."""

    if not first and not second:
        return 1.0
    if not first or not second:
        return 0.0
    return 1 - Levenshtein.distance(first, second) / max(len(first), len(second))
