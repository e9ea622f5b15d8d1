"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from stagetyper.adapters.registry import RegistryClient
from stagetyper.adapters.reports import ReportWriter
from stagetyper.adapters.snapshot import SnapshotReader
from stagetyper.config import (
    MissingConfigurationError,
    get_classification_config,
    get_registry_config,
    get_storage_config,
)
from stagetyper.domain.analysis import analyze_identifiers
from stagetyper.domain.errors import MissingInputError, PublishFailure, RegistryUnavailable

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from stagetyper.adapters.reports import WrittenReports
    from stagetyper.config import ClassificationConfig, StorageConfig
    from stagetyper.domain.analysis import StageTypeAnalysis
    from stagetyper.domain.ports import (
        KnownStageTypeSource,
        StageIdentifierSource,
        StageTypeRegistry,
    )
    from stagetyper.domain.types import ResultRecord


log = getLogger(__name__)


@dataclass(slots=True, frozen=True)
class AnalysisRun:
    analysis: StageTypeAnalysis
    reports: WrittenReports
    known_count: int
    exclusion_version: str
    published: bool

    @property
    def total_count(self) -> int:
        return self.analysis.total_count

    @property
    def new_count(self) -> int:
        return self.analysis.new_count


def analyze_stage_types(
    *,
    storage: StorageConfig | None = None,
    classification: ClassificationConfig | None = None,
    source: StageIdentifierSource | None = None,
    registry: StageTypeRegistry | None = None,
    report_writer: ReportWriter | None = None,
    publish: bool = True,
) -> AnalysisRun:
    """Classify the latest snapshot's stage ids and route new stage types to the registry.

    Only a missing snapshot is fatal (``MissingInputError``). An unreachable
    registry makes every stage type count as new; a failed publish leaves the
    new-type CSV as the hand-off artifact.
    """

    storage_config = storage or get_storage_config()
    classification_config = classification or get_classification_config()
    active_source = source or SnapshotReader(storage=storage_config)
    active_registry = registry if registry is not None else _default_registry()
    writer = report_writer or ReportWriter(storage=storage_config)

    identifiers = list(active_source.iter_stage_identifiers())
    if not identifiers:
        raise MissingInputError("Snapshot contains no stage ids to classify")

    known = load_known_stage_types(active_registry, identifier_count=len(identifiers))
    exclusion = classification_config.exclusion
    log.info("Exclusion policy %s", exclusion.describe())

    analysis = analyze_identifiers(
        identifiers,
        known,
        exclude_prefixes=exclusion.prefixes,
        example_limit=classification_config.example_limit,
        tie_epsilon=classification_config.tie_epsilon,
    )
    reports = writer.write(analysis, data_path=active_source.data_path)

    published = False
    if analysis.new_records:
        _log_new_records(analysis.new_records)
        if publish:
            published = publish_new_stage_types(
                active_registry,
                analysis.new_records,
                fallback=reports.new_types_csv,
                category_count=analysis.total_count,
                stage_id_count=analysis.unique_stage_id_count,
            )
        else:
            log.info("Publishing disabled; new stage types left in %s", reports.new_types_csv)
    else:
        log.info("No new stage types found. All types are already in the registry.")

    log.info(
        "Stage type statistics: existing=%s, new=%s, total unique stage ids=%s",
        analysis.existing_count,
        analysis.new_count,
        analysis.unique_stage_id_count,
    )
    return AnalysisRun(
        analysis=analysis,
        reports=reports,
        known_count=len(known),
        exclusion_version=exclusion.version,
        published=published,
    )


def load_known_stage_types(
    registry: KnownStageTypeSource | None,
    *,
    identifier_count: int = 0,
) -> frozenset[str]:
    """Fetch the registry snapshot, degrading to an empty set when it is unavailable."""

    if registry is None:
        log.warning(
            "No stage-type registry configured; every stage type of %s stage ids will be reported"
            " as new",
            identifier_count,
        )
        return frozenset()
    try:
        return registry.fetch_known_stage_types()
    except RegistryUnavailable as exc:
        log.warning(
            "%s; continuing with an empty known stage-type list for %s stage ids",
            exc,
            identifier_count,
        )
        return frozenset()


def publish_new_stage_types(
    registry: StageTypeRegistry | None,
    records: Sequence[ResultRecord],
    *,
    fallback: Path | None = None,
    category_count: int = 0,
    stage_id_count: int = 0,
) -> bool:
    """Append ``records`` to the registry; return whether the registry accepted them."""

    try:
        if registry is None:
            raise PublishFailure("No stage-type registry configured")  # noqa: TRY301
        response = registry.publish_new_stage_types(records)
    except PublishFailure as exc:
        log.warning(
            "Failed to send %s new stage types to registry (%s categories, %s stage ids): %s",
            len(records),
            category_count,
            stage_id_count,
            exc,
        )
        target = registry.edit_url if registry is not None else "the stage-type registry"
        log.warning("Please add these types manually to %s (rows in %s)", target, fallback)
        return False
    log.info("Successfully sent %s new stage types to registry: %s", len(records), response)
    return True


def _default_registry() -> RegistryClient | None:
    try:
        config = get_registry_config()
    except MissingConfigurationError as exc:
        log.warning("Stage-type registry disabled: %s", exc)
        return None
    return RegistryClient(config=config)


def _log_new_records(records: Sequence[ResultRecord]) -> None:
    log.info("New stage types found:")
    for index, record in enumerate(records, start=1):
        log.info(
            "%s. %s (%s stages, confidence: %.3f) examples: %s",
            index,
            record.stage_type,
            record.count,
            record.avg_confidence,
            record.examples,
        )
