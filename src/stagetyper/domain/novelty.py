"""Diff of aggregated stage types against the known registry snapshot."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Set

    from stagetyper.domain.types import CategoryAggregate, StageType


def is_new(category: StageType, known: Set[StageType]) -> bool:
    return category not in known


def mark_new(aggregates: Iterable[CategoryAggregate], known: Set[StageType]) -> None:
    for aggregate in aggregates:
        aggregate.is_new = is_new(aggregate.category, known)
