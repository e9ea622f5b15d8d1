"""Stage-type registry adapter."""

from __future__ import annotations

from .client import RegistryClient
from .schema import NewStageTypeEntry, NewStageTypesPayload
from .translator import parse_known_stage_types

__all__ = [
    "NewStageTypeEntry",
    "NewStageTypesPayload",
    "RegistryClient",
    "parse_known_stage_types",
]
