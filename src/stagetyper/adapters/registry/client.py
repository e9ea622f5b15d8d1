"""HTTP client for the spreadsheet-backed stage-type registry."""

from __future__ import annotations

import asyncio
from datetime import UTC, datetime
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from stagetyper.adapters.http_resilience import ResilientClient
from stagetyper.domain.errors import PublishFailure, RegistryUnavailable

from .schema import NewStageTypeEntry, NewStageTypesPayload
from .translator import parse_known_stage_types

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from stagetyper.config.http_resilience import ResilienceConfig
    from stagetyper.config.registry import RegistryConfig
    from stagetyper.domain.types import ResultRecord

log = getLogger(__name__)

_ERROR_BODY_PREVIEW = 500


def _utcnow() -> datetime:
    return datetime.now(UTC)


class RegistryClient:
    """Reads known stage types from the sheet and appends new ones via the webhook."""

    def __init__(
        self,
        *,
        config: RegistryConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
        now_provider: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._config = config
        self._client_factory = client_factory or ResilientClient
        self._now = now_provider

    @property
    def edit_url(self) -> str:
        return self._config.edit_url

    def fetch_known_stage_types(self) -> frozenset[str]:
        return asyncio.run(self._fetch_known_async())

    def publish_new_stage_types(self, records: Sequence[ResultRecord]) -> str:
        return asyncio.run(self._publish_async(records))

    async def _fetch_known_async(self) -> frozenset[str]:
        log.info("Fetching known stage types from sheet %s", self._config.sheet_name)
        try:
            async with self._client_factory(self._config.read_resilience) as client:
                response = await client.get(self._config.csv_path)
                response.raise_for_status()
        except httpx.HTTPError as exc:
            raise RegistryUnavailable(f"Could not read stage-type registry: {exc}") from exc

        known = parse_known_stage_types(response.text)
        log.info("Found %s known stage types in registry", len(known))
        return known

    async def _publish_async(self, records: Sequence[ResultRecord]) -> str:
        webhook_url = self._config.webhook_url
        if webhook_url is None:
            raise PublishFailure("GAS_WEBHOOK_URL is not configured")

        payload = NewStageTypesPayload(
            timestamp=self._now(),
            new_types=[NewStageTypeEntry.from_record(record) for record in records],
        )
        log.info("Sending %s new stage types to registry webhook", len(payload.new_types))
        try:
            async with self._client_factory(self._config.publish_resilience) as client:
                response = await client.post(webhook_url, json=payload.to_json())
        except httpx.HTTPError as exc:
            raise PublishFailure(f"Registry webhook request failed: {exc}") from exc

        log.debug("Registry webhook responded %s %s", response.status_code, response.reason_phrase)
        if response.is_error:
            body = response.text[:_ERROR_BODY_PREVIEW]
            raise PublishFailure(
                f"Registry webhook failed: {response.status_code} - {body}",
                status_code=response.status_code,
            )
        return response.text
