"""Grouping of classified stage ids into per-category aggregates."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from stagetyper.domain.classification import StageTypeClassifier, normalize
from stagetyper.domain.types import CategoryAggregate

if TYPE_CHECKING:
    from collections.abc import Iterable

    from stagetyper.domain.types import StageIdentifier, StageType

log = getLogger(__name__)

DEFAULT_EXAMPLE_LIMIT = 5


@dataclass(slots=True)
class StageTypeAggregator:
    """Owns the category map for a single run.

    Stage ids are visited in the order they are fed; example lists keep the
    first ids seen for each category, so that order is observable.
    """

    exclude_prefixes: tuple[str, ...] = ()
    example_limit: int = DEFAULT_EXAMPLE_LIMIT
    classifier: StageTypeClassifier = field(default_factory=StageTypeClassifier)
    aggregates: dict[StageType, CategoryAggregate] = field(default_factory=dict)
    seen_count: int = 0
    excluded_count: int = 0

    def __post_init__(self) -> None:
        self.exclude_prefixes = tuple(prefix.lower() for prefix in self.exclude_prefixes)

    def is_excluded(self, stage_id: str) -> bool:
        return normalize(stage_id).startswith(self.exclude_prefixes)

    def add(self, identifier: StageIdentifier) -> CategoryAggregate | None:
        stage_id = identifier.stage_id
        if not stage_id:
            log.debug("Skipping empty stage id from partition %s", identifier.partition)
            return None
        self.seen_count += 1
        if self.is_excluded(stage_id):
            self.excluded_count += 1
            return None

        result = self.classifier.classify(stage_id)
        aggregate = self.aggregates.get(result.category)
        if aggregate is None:
            aggregate = CategoryAggregate(category=result.category)
            self.aggregates[result.category] = aggregate

        aggregate.members.add(stage_id)
        aggregate.confidences.append(result.confidence)
        if len(aggregate.examples) < self.example_limit and stage_id not in aggregate.examples:
            aggregate.examples.append(stage_id)
        return aggregate

    def add_all(self, identifiers: Iterable[StageIdentifier]) -> None:
        for identifier in identifiers:
            self.add(identifier)
        log.debug(
            "Aggregated %s stage ids into %s stage types (%s excluded)",
            self.seen_count - self.excluded_count,
            len(self.aggregates),
            self.excluded_count,
        )
