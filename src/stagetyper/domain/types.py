"""Value types shared across the stage-type engine."""

from __future__ import annotations

from dataclasses import dataclass, field

# Basic aliases (PEP 695) so we can upgrade to value objects later.
type StageId = str
type StageType = str
type Partition = str

UNKNOWN_STAGE_TYPE: StageType = "unknown"


@dataclass(slots=True, frozen=True)
class StageIdentifier:
    """A raw stage id together with the partition (server) it was read from."""

    partition: Partition
    stage_id: StageId


@dataclass(slots=True, frozen=True)
class ClassificationResult:
    category: StageType
    confidence: float


@dataclass(slots=True)
class CategoryAggregate:
    """Accumulated membership and confidence for one stage type during a run."""

    category: StageType
    members: set[StageId] = field(default_factory=set)
    examples: list[StageId] = field(default_factory=list)
    confidences: list[float] = field(default_factory=list)
    is_new: bool = False

    @property
    def count(self) -> int:
        return len(self.members)

    @property
    def avg_confidence(self) -> float:
        if not self.confidences:
            return 0.0
        return round(sum(self.confidences) / len(self.confidences), 3)


@dataclass(slots=True, frozen=True)
class ResultRecord:
    """Persisted shape of a category aggregate."""

    stage_type: StageType
    count: int
    examples: str
    avg_confidence: float
    all_stage_ids: tuple[StageId, ...]
    is_new: bool

    @classmethod
    def from_aggregate(cls, aggregate: CategoryAggregate) -> ResultRecord:
        return cls(
            stage_type=aggregate.category,
            count=aggregate.count,
            examples=", ".join(aggregate.examples),
            avg_confidence=aggregate.avg_confidence,
            all_stage_ids=tuple(sorted(aggregate.members)),
            is_new=aggregate.is_new,
        )

    def to_payload(self) -> dict[str, object]:
        return {
            "stageType": self.stage_type,
            "count": self.count,
            "examples": self.examples,
            "avgConfidence": f"{self.avg_confidence:.3f}",
            "allStageIds": list(self.all_stage_ids),
            "isNew": self.is_new,
        }


__all__ = [
    "UNKNOWN_STAGE_TYPE",
    "CategoryAggregate",
    "ClassificationResult",
    "Partition",
    "ResultRecord",
    "StageId",
    "StageIdentifier",
    "StageType",
]
