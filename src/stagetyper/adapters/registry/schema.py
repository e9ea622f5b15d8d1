"""Payload schema of the registry append webhook."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 # pydantic resolves field types at runtime
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from stagetyper.domain.types import ResultRecord


class RegistryBaseModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class NewStageTypeEntry(RegistryBaseModel):
    """One row to append; the name and notes columns are left for a human."""

    stage_type: str = Field(alias="stageType")
    count: int
    confidence: str
    examples: str
    japanese_name: str = Field(default="", alias="japaneseName")
    notes: str = ""

    @classmethod
    def from_record(cls, record: ResultRecord) -> NewStageTypeEntry:
        return cls(
            stage_type=record.stage_type,
            count=record.count,
            confidence=f"{record.avg_confidence:.3f}",
            examples=record.examples,
        )


class NewStageTypesPayload(RegistryBaseModel):
    timestamp: datetime
    new_types: list[NewStageTypeEntry] = Field(alias="newTypes")

    def to_json(self) -> dict[str, object]:
        return self.model_dump(mode="json", by_alias=True)
