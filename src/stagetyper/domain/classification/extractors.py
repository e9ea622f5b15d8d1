"""Candidate extraction strategies.

Every strategy maps a normalized stage id to a guess at its stage type by
stripping the "instance" part (episode numbers, difficulty suffixes) and
keeping the structural family. Strategies are independent; the selector
decides between their answers.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from stagetyper.domain.errors import ExtractorFault

from .normalize import first_segment, split_segments

if TYPE_CHECKING:
    from collections.abc import Iterable

log = getLogger(__name__)

type Extractor = Callable[[str], str]

_LETTERS = re.compile(r"[a-z]+")
_DIGITS = re.compile(r"[0-9]+")
_COMPOUND = re.compile(r"[a-z]+[0-9]+[a-z]+[0-9]+")
_LETTER_DIGIT_LETTER = re.compile(r"[a-z]+[0-9]+[a-z]+")
_LETTER_DIGIT = re.compile(r"[a-z]+[0-9]+")

_MODE_SUFFIX = re.compile(r"[-_](rep|perm)$")
_INSTANCE_SUFFIX = re.compile(r"[-_][0-9]+[-_]?[0-9]*$")

_PATTERNS: tuple[re.Pattern[str], ...] = (
    _COMPOUND,
    _LETTER_DIGIT_LETTER,
    re.compile(r"[a-z]+_[0-9]+"),
    re.compile(r"[a-z]+_[a-z]+"),
    _LETTER_DIGIT,
    _LETTERS,
)


def extract_by_segments(normalized: str) -> str:
    """Rebuild the family from the leading hyphen/underscore segments.

    ``act11d0_03`` -> ``act11d0``, ``act13side_07`` -> ``act13side``,
    ``main_07-02`` -> ``main_07``, ``wk_melee_3`` -> ``wk_melee``,
    ``a001_05`` -> ``a001``.
    """

    parts = split_segments(normalized)
    head = parts[0]

    for shape in (_COMPOUND, _LETTER_DIGIT_LETTER):
        match = shape.match(head)
        if match:
            return match.group(0)

    if len(parts) >= 2 and _LETTERS.fullmatch(head):
        if _DIGITS.fullmatch(parts[1]) or _LETTERS.fullmatch(parts[1]):
            return f"{head}_{parts[1]}"

    match = _LETTER_DIGIT.match(head)
    if match:
        return match.group(0)
    return head


def extract_by_suffix(normalized: str) -> str:
    """Strip a trailing replay marker and then a trailing instance number run."""

    result = _MODE_SUFFIX.sub("", normalized)
    return _INSTANCE_SUFFIX.sub("", result)


def extract_by_pattern(normalized: str) -> str:
    """Return the prefix matched by the first shape that fits, most specific shape first."""

    for pattern in _PATTERNS:
        match = pattern.match(normalized)
        if match:
            return match.group(0)
    return first_segment(normalized)


def extract_by_underscore_tail(normalized: str) -> str:
    """Drop trailing underscore-separated parts that start with a digit."""

    parts = normalized.split("_")
    while len(parts) > 1 and _DIGITS.match(parts[-1]):
        parts.pop()
    return "_".join(parts)


DEFAULT_EXTRACTORS: tuple[Extractor, ...] = (
    extract_by_segments,
    extract_by_suffix,
    extract_by_pattern,
    extract_by_underscore_tail,
)


def run_extractor(extractor: Extractor, normalized: str) -> str:
    """Apply ``extractor``; on failure log it and hand back ``normalized`` unchanged."""

    try:
        return extractor(normalized)
    except Exception as exc:  # noqa: BLE001
        fault = ExtractorFault(getattr(extractor, "__name__", repr(extractor)), normalized, exc)
        log.debug("%s", fault)
        return normalized


def extract_candidates(
    normalized: str,
    extractors: Iterable[Extractor] = DEFAULT_EXTRACTORS,
) -> list[str]:
    """Return the candidate set: extractor outputs minus no-ops and empty results."""

    candidates: list[str] = []
    for extractor in extractors:
        candidate = run_extractor(extractor, normalized)
        if not candidate or candidate == normalized:
            continue
        candidates.append(candidate)
    return candidates
