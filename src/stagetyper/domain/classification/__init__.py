"""Identifier parsing heuristics that infer a stage type from a stage id."""

from __future__ import annotations

from .classifier import StageTypeClassifier, classify
from .complexity import MAX_COMPLEXITY, complexity
from .confidence import MAX_CONFIDENCE, MIN_CONFIDENCE, confidence
from .extractors import (
    DEFAULT_EXTRACTORS,
    Extractor,
    extract_by_pattern,
    extract_by_segments,
    extract_by_suffix,
    extract_by_underscore_tail,
    extract_candidates,
    run_extractor,
)
from .normalize import first_segment, normalize
from .selection import select

__all__ = [
    "DEFAULT_EXTRACTORS",
    "MAX_COMPLEXITY",
    "MAX_CONFIDENCE",
    "MIN_CONFIDENCE",
    "Extractor",
    "StageTypeClassifier",
    "classify",
    "complexity",
    "confidence",
    "extract_by_pattern",
    "extract_by_segments",
    "extract_by_suffix",
    "extract_by_underscore_tail",
    "extract_candidates",
    "first_segment",
    "normalize",
    "run_extractor",
    "select",
]
