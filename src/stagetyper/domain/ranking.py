"""Ordering of result records."""

from __future__ import annotations

from functools import cmp_to_key
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from stagetyper.domain.types import ResultRecord

CONFIDENCE_TIE_EPSILON = 0.01


def _comparator(epsilon: float) -> Callable[[ResultRecord, ResultRecord], float]:
    def compare(a: ResultRecord, b: ResultRecord) -> float:
        diff = b.avg_confidence - a.avg_confidence
        if abs(diff) < epsilon:
            return b.count - a.count
        return diff

    return compare


def rank_records(
    records: Iterable[ResultRecord],
    *,
    epsilon: float = CONFIDENCE_TIE_EPSILON,
) -> list[ResultRecord]:
    """Sort by descending average confidence.

    Confidences closer than ``epsilon`` count as tied and the record with more
    members goes first; equal counts keep their incoming order.
    """

    return sorted(records, key=cmp_to_key(_comparator(epsilon)))
