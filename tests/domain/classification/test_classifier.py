from __future__ import annotations

import pytest

from stagetyper.domain.classification import (
    StageTypeClassifier,
    classify,
    complexity,
    extract_by_suffix,
)
from stagetyper.domain.types import UNKNOWN_STAGE_TYPE, ClassificationResult


@pytest.mark.parametrize(
    ("stage_id", "category", "rank"),
    [
        ("main_07-02", "main_07", 2),
        ("act13side", "act13side", 3),
        ("wk_melee_3", "wk_melee", 2),
        ("act11d0_03", "act11d0", 4),
        ("act13side_07", "act13side", 3),
        ("a001_05", "a001", 1),
        ("tough_10-1", "tough_10", 2),
        ("camp", "camp", 0),
    ],
)
def test_classify_known_shapes(stage_id: str, category: str, rank: int) -> None:
    result = classify(stage_id)

    assert result.category == category
    assert complexity(result.category) == rank


def test_classify_normalizes_case_and_whitespace() -> None:
    assert classify("  Main_07-02 ").category == "main_07"


@pytest.mark.parametrize("raw", ["", None, 42, b"main_07-02"])
def test_classify_short_circuits_unusable_input(raw: object) -> None:
    assert classify(raw) == ClassificationResult(category=UNKNOWN_STAGE_TYPE, confidence=0.5)


def test_classify_blank_string_falls_back_to_unknown() -> None:
    assert classify("   ").category == UNKNOWN_STAGE_TYPE


def test_classify_is_deterministic() -> None:
    stage_ids = ["main_07-02", "act13side", "wk_melee_3", "tough", "sub_01-1", "1-7"]

    first = [classify(stage_id) for stage_id in stage_ids]
    second = [classify(stage_id) for stage_id in reversed(stage_ids)]

    assert first == list(reversed(second))


def test_classifier_falls_back_to_first_segment() -> None:
    classifier = StageTypeClassifier(extractors=(extract_by_suffix,))

    assert classifier.stage_type("camp-x") == "camp"


def test_classifier_survives_faulty_extractors() -> None:
    def broken(_normalized: str) -> str:
        raise RuntimeError("boom")

    classifier = StageTypeClassifier(extractors=(broken, broken))

    assert classifier.classify("wk_melee_3").category == "wk"
