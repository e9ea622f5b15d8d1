"""Ports for the externally curated stage-type registry."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from stagetyper.domain.types import ResultRecord, StageType


@runtime_checkable
class KnownStageTypeSource(Protocol):
    """Returns the snapshot of stage types that already have a registry row.

    Implementations raise ``RegistryUnavailable`` when the registry cannot be read.
    """

    def fetch_known_stage_types(self) -> frozenset[StageType]: ...


@runtime_checkable
class NewStageTypePublisher(Protocol):
    """Appends new stage types to the registry for a human to name.

    Implementations raise ``PublishFailure`` when the rows were not accepted.
    """

    def publish_new_stage_types(self, records: Sequence[ResultRecord]) -> str: ...


@runtime_checkable
class StageTypeRegistry(KnownStageTypeSource, NewStageTypePublisher, Protocol):
    """Registry that can be read and appended to; ``edit_url`` is shown to humans."""

    @property
    def edit_url(self) -> str: ...


__all__ = ["KnownStageTypeSource", "NewStageTypePublisher", "StageTypeRegistry"]
