"""Port for the per-partition stage id stream."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator

    from stagetyper.domain.types import StageIdentifier


@runtime_checkable
class StageIdentifierSource(Protocol):
    """Yields ``(partition, stage id)`` pairs in presentation order.

    ``data_path`` names the snapshot the stream belongs to; run artifacts are
    filed under it. Implementations raise ``MissingInputError`` when no
    snapshot can be read.
    """

    @property
    def data_path(self) -> str: ...

    def iter_stage_identifiers(self) -> Iterator[StageIdentifier]: ...


__all__ = ["StageIdentifierSource"]
