"""Confidence scoring for a single classification decision."""

from __future__ import annotations

import re

from .complexity import complexity

BASELINE_CONFIDENCE = 0.5
MIN_CONFIDENCE = 0.1
MAX_CONFIDENCE = 1.0

_COMPACT_LENGTH = range(3, 16)
_HAS_DIGIT = re.compile(r"[0-9]")
_HAS_LETTER = re.compile(r"[a-z]")


def confidence(original: str, category: str) -> float:
    """Score how trustworthy ``category`` is as the stage type of ``original``.

    Structured categories (complex shape, underscore joins, mixed letters and
    digits) score higher; a category that actually shortened the id gets a
    small bonus. The result is clamped to ``[0.1, 1.0]``.
    """

    score = BASELINE_CONFIDENCE
    score += complexity(category) * 0.1
    if len(category) in _COMPACT_LENGTH:
        score += 0.2
    if "_" in category:
        score += 0.2
    if _HAS_DIGIT.search(category) and _HAS_LETTER.search(category):
        score += 0.2
    lowered = original.lower()
    if category != lowered and len(category) < len(lowered):
        score += 0.1
    return min(MAX_CONFIDENCE, max(MIN_CONFIDENCE, score))
