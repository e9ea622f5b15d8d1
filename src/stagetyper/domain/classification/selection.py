"""Winner selection among extractor candidates."""

from __future__ import annotations

from functools import reduce
from typing import TYPE_CHECKING

from .complexity import complexity

if TYPE_CHECKING:
    from collections.abc import Sequence


def _prefer(best: str, candidate: str) -> str:
    best_rank = complexity(best)
    candidate_rank = complexity(candidate)
    if candidate_rank != best_rank:
        return candidate if candidate_rank > best_rank else best
    if len(candidate) != len(best):
        return candidate if len(candidate) > len(best) else best
    return candidate if candidate < best else best


def select(candidates: Sequence[str]) -> str:
    """Fold ``candidates`` left to right, replacing the best only on strict improvement.

    Ordering is complexity rank, then length, then lexicographically smaller.
    """

    if not candidates:
        raise ValueError("select() requires at least one candidate")
    return reduce(_prefer, candidates[1:], candidates[0])
