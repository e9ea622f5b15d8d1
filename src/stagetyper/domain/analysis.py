"""Single-pass stage-type analysis over one identifier stream."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from stagetyper.domain.aggregation import DEFAULT_EXAMPLE_LIMIT, StageTypeAggregator
from stagetyper.domain.classification import StageTypeClassifier
from stagetyper.domain.novelty import mark_new
from stagetyper.domain.ranking import CONFIDENCE_TIE_EPSILON, rank_records
from stagetyper.domain.types import ResultRecord

if TYPE_CHECKING:
    from collections.abc import Iterable, Set

    from stagetyper.domain.types import StageIdentifier, StageType

log = getLogger(__name__)


@dataclass(slots=True, frozen=True)
class StageTypeAnalysis:
    """Ranked records of one run: every stage type and the new-only subset."""

    all_records: tuple[ResultRecord, ...]
    new_records: tuple[ResultRecord, ...]

    @property
    def total_count(self) -> int:
        return len(self.all_records)

    @property
    def new_count(self) -> int:
        return len(self.new_records)

    @property
    def existing_count(self) -> int:
        return self.total_count - self.new_count

    @property
    def unique_stage_id_count(self) -> int:
        return len({stage_id for record in self.all_records for stage_id in record.all_stage_ids})


def analyze_identifiers(
    identifiers: Iterable[StageIdentifier],
    known: Set[StageType],
    *,
    exclude_prefixes: Iterable[str] = (),
    example_limit: int = DEFAULT_EXAMPLE_LIMIT,
    tie_epsilon: float = CONFIDENCE_TIE_EPSILON,
    classifier: StageTypeClassifier | None = None,
) -> StageTypeAnalysis:
    aggregator = StageTypeAggregator(
        exclude_prefixes=tuple(exclude_prefixes),
        example_limit=example_limit,
        classifier=classifier or StageTypeClassifier(),
    )
    aggregator.add_all(identifiers)
    mark_new(aggregator.aggregates.values(), known)

    records = [ResultRecord.from_aggregate(aggregate) for aggregate in aggregator.aggregates.values()]
    all_records = rank_records(records, epsilon=tie_epsilon)
    new_records = rank_records((record for record in records if record.is_new), epsilon=tie_epsilon)

    log.info(
        "Classified %s stage ids into %s stage types (%s new, %s excluded)",
        aggregator.seen_count - aggregator.excluded_count,
        len(all_records),
        len(new_records),
        aggregator.excluded_count,
    )
    return StageTypeAnalysis(all_records=tuple(all_records), new_records=tuple(new_records))
