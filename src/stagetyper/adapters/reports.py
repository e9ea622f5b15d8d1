"""File artifacts of a stage-type analysis run."""

from __future__ import annotations

import csv
import io
import json
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from stagetyper.config.storage import (
    DETAIL_FILENAME,
    NEW_TYPES_CSV_FILENAME,
    NEW_TYPES_FILENAME,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from stagetyper.config.storage import StorageConfig
    from stagetyper.domain.analysis import StageTypeAnalysis
    from stagetyper.domain.types import ResultRecord

log = getLogger(__name__)

CSV_HEADER = ("Stage Type", "Count", "Confidence", "Japanese Name", "Examples", "Notes")


@dataclass(slots=True)
class WrittenReports:
    paths: list[Path] = field(default_factory=list)
    new_types_csv: Path | None = None


def records_to_json(records: Sequence[ResultRecord]) -> str:
    return json.dumps([record.to_payload() for record in records], indent=2, ensure_ascii=False)


def records_to_csv(records: Sequence[ResultRecord]) -> str:
    """Render new stage types as rows for manual entry; name and notes stay blank."""

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for record in records:
        writer.writerow(
            (
                record.stage_type,
                record.count,
                f"{record.avg_confidence:.3f}",
                "",
                record.examples,
                "",
            )
        )
    return buffer.getvalue()


class ReportWriter:
    """Writes the dated run artifacts and mirrors them as ``latest-*`` files."""

    def __init__(self, *, storage: StorageConfig) -> None:
        self._storage = storage

    def write(self, analysis: StageTypeAnalysis, *, data_path: str) -> WrittenReports:
        run_dir = self._storage.run_dir(data_path)
        run_dir.mkdir(parents=True, exist_ok=True)
        reports = WrittenReports()

        documents = {
            DETAIL_FILENAME: records_to_json(analysis.all_records),
            NEW_TYPES_FILENAME: records_to_json(analysis.new_records),
        }
        for filename, content in documents.items():
            reports.paths.extend(self._write_pair(run_dir, filename, content))

        if analysis.new_records:
            csv_paths = self._write_pair(
                run_dir, NEW_TYPES_CSV_FILENAME, records_to_csv(analysis.new_records)
            )
            reports.paths.extend(csv_paths)
            reports.new_types_csv = csv_paths[0]
            log.info("New stage types CSV created: %s", reports.new_types_csv)

        for path in reports.paths:
            log.debug("Saved %s", path)
        return reports

    def _write_pair(self, run_dir: Path, filename: str, content: str) -> list[Path]:
        dated = run_dir / filename
        latest = self._storage.resolve_data_dir() / self._storage.latest_name(filename)
        for path in (dated, latest):
            path.write_text(content, encoding="utf-8")
        return [dated, latest]
