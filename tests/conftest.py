from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from stagetyper.config import StorageConfig

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

_ENV_VARS = (
    "STAGETYPER_DATA_DIR",
    "STAGETYPER_SPREADSHEET_ID",
    "STAGETYPER_SHEET_NAME",
    "STAGETYPER_EXCLUDE_PREFIXES",
    "STAGETYPER_EXCLUDE_VERSION",
    "GAS_WEBHOOK_URL",
)

SNAPSHOT_DATA_PATH = "2026-10-19"


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def storage(tmp_path: Path) -> StorageConfig:
    return StorageConfig(data_dir=tmp_path)


@pytest.fixture
def server_data() -> dict[str, object]:
    return {
        "CN": {
            "fetchedAt": "2026-10-19T00:00:00.000Z",
            "data": {
                "main_07-02": {"times": 120},
                "main_07-01": {"times": 80},
                "act13side_07": {"times": 42},
                "act13side_08": {"times": 40},
                "wk_melee_3": {"times": 9},
                "recruit_01": {"times": 1},
                "randommaterial_1": {"times": 1},
            },
        },
        "KR": {"fetchedAt": "2026-10-19T00:00:00.000Z", "data": None},
        "US": {
            "fetchedAt": "2026-10-19T00:00:00.000Z",
            "data": {
                "main_07-02": {"times": 30},
                "a001_05": {"times": 3},
                "tough_10-1": {"times": 7},
                "camp": {"times": 2},
                "sp": {"times": 2},
            },
        },
    }


@pytest.fixture
def write_snapshot(storage: StorageConfig) -> Callable[[dict[str, object]], Path]:
    def write(payload: dict[str, object]) -> Path:
        path = storage.snapshot_index_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return write


@pytest.fixture
def snapshot_path(
    write_snapshot: Callable[[dict[str, object]], Path],
    server_data: dict[str, object],
) -> Path:
    return write_snapshot({"latestDataPath": SNAPSHOT_DATA_PATH, "serverData": server_data})
