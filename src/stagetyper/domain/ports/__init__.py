"""Domain port definitions for adapters."""

from __future__ import annotations

from .registry import KnownStageTypeSource, NewStageTypePublisher, StageTypeRegistry
from .snapshot import StageIdentifierSource

__all__ = [
    "KnownStageTypeSource",
    "NewStageTypePublisher",
    "StageIdentifierSource",
    "StageTypeRegistry",
]
