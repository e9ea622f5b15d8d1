"""Stage-type classification of a single identifier."""

from __future__ import annotations

from dataclasses import dataclass, field

from stagetyper.domain.types import UNKNOWN_STAGE_TYPE, ClassificationResult

from .confidence import BASELINE_CONFIDENCE, confidence
from .extractors import DEFAULT_EXTRACTORS, Extractor, extract_candidates
from .normalize import first_segment, is_classifiable, normalize
from .selection import select


@dataclass(slots=True, frozen=True)
class StageTypeClassifier:
    """Runs the extractor ensemble and scores the winning stage type."""

    extractors: tuple[Extractor, ...] = field(default=DEFAULT_EXTRACTORS)

    def stage_type(self, raw: object) -> str:
        if not is_classifiable(raw):
            return UNKNOWN_STAGE_TYPE
        normalized = normalize(raw)
        candidates = extract_candidates(normalized, self.extractors)
        if not candidates:
            return first_segment(normalized) or UNKNOWN_STAGE_TYPE
        return select(candidates)

    def classify(self, raw: object) -> ClassificationResult:
        if not is_classifiable(raw):
            return ClassificationResult(category=UNKNOWN_STAGE_TYPE, confidence=BASELINE_CONFIDENCE)
        category = self.stage_type(raw)
        return ClassificationResult(category=category, confidence=confidence(raw, category))


_DEFAULT_CLASSIFIER = StageTypeClassifier()


def classify(raw: object) -> ClassificationResult:
    """Classify ``raw`` with the default extractor ensemble."""

    return _DEFAULT_CLASSIFIER.classify(raw)
