"""Reader for the drop-rate snapshot index written by the daily fetch job."""

from __future__ import annotations

import json
from collections.abc import Mapping
from logging import getLogger
from typing import TYPE_CHECKING, cast

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from stagetyper.domain.errors import MissingInputError
from stagetyper.domain.types import StageIdentifier

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from stagetyper.config.storage import StorageConfig

log = getLogger(__name__)


class SnapshotBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class PartitionSnapshot(SnapshotBaseModel):
    """Per-server payload.

    ``data`` is either keyed by stage id or, in older snapshots, the raw matrix
    rows that each carry a ``stageId``. Any other shape counts as no payload.
    """

    data: dict[str, object] | list[dict[str, object]] | None = None

    @field_validator("data", mode="before")
    @classmethod
    def _drop_unusable_payload(cls, value: object) -> object:
        if isinstance(value, Mapping):
            return value
        if isinstance(value, list):
            rows = cast(list[object], value)
            return [row for row in rows if isinstance(row, Mapping)]
        return None

    def stage_ids(self) -> list[str]:
        if self.data is None:
            return []
        if isinstance(self.data, dict):
            return list(self.data)
        seen: dict[str, None] = {}
        for row in self.data:
            stage_id = row.get("stageId")
            if isinstance(stage_id, str):
                seen.setdefault(stage_id, None)
        return list(seen)


class SnapshotIndex(SnapshotBaseModel):
    latest_data_path: str = Field(alias="latestDataPath")
    server_data: dict[str, PartitionSnapshot | None] = Field(alias="serverData")

    @field_validator("server_data", mode="before")
    @classmethod
    def _blank_partitions(cls, value: object) -> object:
        if not isinstance(value, Mapping):
            return value
        partitions = cast(Mapping[str, object], value)
        return {
            name: partition if isinstance(partition, Mapping) else None
            for name, partition in partitions.items()
        }


class SnapshotReader:
    """Yields stage ids from every partition of the latest snapshot."""

    def __init__(self, *, storage: StorageConfig) -> None:
        self._storage = storage
        self._index: SnapshotIndex | None = None

    @property
    def path(self) -> Path:
        return self._storage.snapshot_index_path()

    @property
    def data_path(self) -> str:
        return self.load().latest_data_path

    def load(self) -> SnapshotIndex:
        if self._index is not None:
            return self._index
        path = self.path
        if not path.is_file():
            raise MissingInputError(f"Snapshot index not found: {path}")
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
            self._index = SnapshotIndex.model_validate(payload)
        except (json.JSONDecodeError, ValidationError) as exc:
            raise MissingInputError(f"Invalid snapshot index {path}: {exc}") from exc
        log.info("Processing data from: %s", self._index.latest_data_path)
        return self._index

    def iter_stage_identifiers(self) -> Iterator[StageIdentifier]:
        for partition, snapshot in self.load().server_data.items():
            if snapshot is None or snapshot.data is None:
                log.debug("Partition %s has no data payload; skipping", partition)
                continue
            for stage_id in snapshot.stage_ids():
                yield StageIdentifier(partition=partition, stage_id=stage_id)
