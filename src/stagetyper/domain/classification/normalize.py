"""Identifier normalization."""

from __future__ import annotations

import re
from typing import TypeGuard

_SEGMENT_SEPARATOR = re.compile(r"[-_]")


def normalize(raw: str) -> str:
    return raw.strip().lower()


def is_classifiable(raw: object) -> TypeGuard[str]:
    """Return whether ``raw`` is a non-empty string worth running extractors on."""

    return isinstance(raw, str) and bool(raw)


def first_segment(normalized: str) -> str:
    """Return the part of ``normalized`` before the first hyphen or underscore."""

    return _SEGMENT_SEPARATOR.split(normalized, maxsplit=1)[0]


def split_segments(normalized: str) -> list[str]:
    return _SEGMENT_SEPARATOR.split(normalized)
