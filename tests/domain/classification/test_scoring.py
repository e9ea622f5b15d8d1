"""Complexity ranking, winner selection and confidence scoring."""

from __future__ import annotations

import pytest

from stagetyper.domain.classification import (
    MAX_COMPLEXITY,
    MAX_CONFIDENCE,
    MIN_CONFIDENCE,
    complexity,
    confidence,
    select,
)


@pytest.mark.parametrize(
    ("category", "expected"),
    [
        ("act11d0", 4),
        ("act13side", 3),
        ("main_07", 2),
        ("wk_melee", 2),
        ("a001", 1),
        ("tough", 0),
        ("main_07_02", 0),
        ("ACT11D0", 0),
        ("7", 0),
        ("", 0),
        ("ä1", 0),
    ],
)
def test_complexity_ranks_shapes(category: str, expected: int) -> None:
    assert complexity(category) == expected


def test_complexity_is_total() -> None:
    for category in ("-", "_", "a_", "_1", "a-1", "1a1a", "sub_", " act11d0 "):
        assert 0 <= complexity(category) <= MAX_COMPLEXITY


def test_select_prefers_higher_complexity() -> None:
    assert select(["main", "main_07", "main"]) == "main_07"


def test_select_prefers_longer_on_equal_complexity() -> None:
    assert select(["wk_a", "wk_melee"]) == "wk_melee"


def test_select_prefers_lexicographically_smaller_on_full_tie() -> None:
    assert select(["wk_b", "wk_a"]) == "wk_a"
    assert select(["wk_a", "wk_b"]) == "wk_a"


def test_select_single_candidate() -> None:
    assert select(["camp"]) == "camp"


def test_select_requires_candidates() -> None:
    with pytest.raises(ValueError, match="at least one candidate"):
        select([])


def test_confidence_baseline_for_short_plain_word() -> None:
    assert confidence("a", "a") == pytest.approx(0.5)


def test_confidence_length_bonus() -> None:
    assert confidence("tough", "tough") == pytest.approx(0.7)


def test_confidence_shortening_bonus() -> None:
    assert confidence("XYZ_1", "xyz") == pytest.approx(0.8)


def test_confidence_is_clamped_at_one() -> None:
    assert confidence("main_07-02", "main_07") == MAX_CONFIDENCE


def test_confidence_ignores_long_plain_words() -> None:
    assert confidence("abcdefghijklmnopqrstu", "abcdefghijklmnopqrstu") == pytest.approx(0.5)


@pytest.mark.parametrize(
    "stage_id",
    ["main_07-02", "act11d0_03", "x", "camp", "wk_melee_3", "a" * 40, "1-7"],
)
def test_confidence_bounds(stage_id: str) -> None:
    for category in (stage_id, stage_id[:3], "unknown", ""):
        assert MIN_CONFIDENCE <= confidence(stage_id, category) <= MAX_CONFIDENCE
