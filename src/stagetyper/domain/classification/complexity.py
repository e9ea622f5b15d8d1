"""Structural complexity ranking of candidate stage types."""

from __future__ import annotations

import re

# Most specific shape first; the first full match decides the rank.
_RANKED_SHAPES: tuple[tuple[re.Pattern[str], int], ...] = (
    (re.compile(r"[a-z]+[0-9]+[a-z]+[0-9]+"), 4),
    (re.compile(r"[a-z]+[0-9]+[a-z]+"), 3),
    (re.compile(r"[a-z]+_[a-z0-9]+"), 2),
    (re.compile(r"[a-z]+[0-9]+"), 1),
)

MAX_COMPLEXITY = 4


def complexity(category: str) -> int:
    """Rank ``category`` by shape: 4 for ``act11d0`` down to 0 for plain words."""

    for shape, rank in _RANKED_SHAPES:
        if shape.fullmatch(category):
            return rank
    return 0
