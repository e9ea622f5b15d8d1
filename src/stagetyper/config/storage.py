"""Data storage configuration helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

DEFAULT_DATA_DIR: Final[str] = "data"
SNAPSHOT_INDEX_FILENAME: Final[str] = "latest.json"
DETAIL_FILENAME: Final[str] = "stage-types-detail.json"
NEW_TYPES_FILENAME: Final[str] = "new-stage-types.json"
NEW_TYPES_CSV_FILENAME: Final[str] = "new-stage-types.csv"
LATEST_PREFIX: Final[str] = "latest-"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    data_dir: Path
    snapshot_index_filename: str = SNAPSHOT_INDEX_FILENAME

    def resolve_data_dir(self) -> Path:
        return self.data_dir.expanduser().resolve()

    def snapshot_index_path(self) -> Path:
        return self.resolve_data_dir() / self.snapshot_index_filename

    def run_dir(self, data_path: str) -> Path:
        """Directory of the dated snapshot the analysis belongs to."""

        return self.resolve_data_dir() / data_path

    @staticmethod
    def latest_name(filename: str) -> str:
        return f"{LATEST_PREFIX}{filename}"


def get_storage_config(*, data_dir: Path | None = None) -> StorageConfig:
    if data_dir is not None:
        return StorageConfig(data_dir=data_dir)
    env_dir = os.getenv("STAGETYPER_DATA_DIR")
    return StorageConfig(data_dir=Path(env_dir) if env_dir else Path(DEFAULT_DATA_DIR))
