from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import TYPE_CHECKING

import httpx
import pytest

from stagetyper.adapters.http_resilience import ResilienceConfig, ResilientClient
from stagetyper.adapters.registry import RegistryClient
from stagetyper.config import RegistryConfig
from stagetyper.domain.errors import PublishFailure, RegistryUnavailable
from stagetyper.domain.ports import StageTypeRegistry
from stagetyper.domain.types import ResultRecord

if TYPE_CHECKING:
    from collections.abc import Callable

WEBHOOK_URL = "https://script.google.com/macros/s/test-deployment/exec"
SHEET_CSV = '"Stage Type","Japanese Name","Notes"\n"main_07","メインストーリー7章",""\n"wk_melee","",""\n"","",""\n'


def _make_client_factory(
    handler: Callable[[httpx.Request], httpx.Response],
) -> Callable[[ResilienceConfig], ResilientClient]:
    async def async_handler(request: httpx.Request) -> httpx.Response:
        return handler(request)

    def factory(resilience: ResilienceConfig) -> ResilientClient:
        client = ResilientClient(resilience)
        client._client = httpx.AsyncClient(  # noqa: SLF001  # type: ignore[reportPrivateUsage]
            transport=httpx.MockTransport(async_handler),
            base_url=resilience.base_url or "",
        )
        return client

    return factory


def _registry(
    handler: Callable[[httpx.Request], httpx.Response],
    *,
    webhook_url: str | None = WEBHOOK_URL,
) -> RegistryClient:
    return RegistryClient(
        config=RegistryConfig(spreadsheet_id="sheet-id", webhook_url=webhook_url),
        client_factory=_make_client_factory(handler),
        now_provider=lambda: datetime(2026, 10, 19, 0, 0, tzinfo=UTC),
    )


def _new_record() -> ResultRecord:
    return ResultRecord(
        stage_type="act13side",
        count=2,
        examples="act13side_07, act13side_08",
        avg_confidence=1.0,
        all_stage_ids=("act13side_07", "act13side_08"),
        is_new=True,
    )


def test_fetch_known_stage_types_reads_first_column() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text=SHEET_CSV)

    registry = _registry(handler)

    assert registry.fetch_known_stage_types() == frozenset({"main_07", "wk_melee"})
    assert isinstance(registry, StageTypeRegistry)
    request = seen[0]
    assert request.method == "GET"
    assert request.url.path == "/spreadsheets/d/sheet-id/gviz/tq"
    assert request.url.params["sheet"] == "stageInfo"
    assert request.url.params["tqx"] == "out:csv"


def test_fetch_known_stage_types_wraps_http_errors() -> None:
    registry = _registry(lambda _request: httpx.Response(500, text="oops"))

    with pytest.raises(RegistryUnavailable):
        registry.fetch_known_stage_types()


def test_fetch_known_stage_types_wraps_network_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("unreachable", request=request)

    with pytest.raises(RegistryUnavailable, match="unreachable"):
        _registry(handler).fetch_known_stage_types()


def test_publish_posts_new_types_payload() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text="OK: 1 rows added")

    response = _registry(handler).publish_new_stage_types([_new_record()])

    assert response == "OK: 1 rows added"
    request = seen[0]
    assert request.method == "POST"
    assert str(request.url) == WEBHOOK_URL
    payload = json.loads(request.content)
    assert payload["timestamp"].startswith("2026-10-19T00:00:00")
    assert payload["newTypes"] == [
        {
            "stageType": "act13side",
            "count": 2,
            "confidence": "1.000",
            "examples": "act13side_07, act13side_08",
            "japaneseName": "",
            "notes": "",
        }
    ]


def test_publish_without_webhook_fails() -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    with pytest.raises(PublishFailure, match="GAS_WEBHOOK_URL"):
        _registry(handler, webhook_url=None).publish_new_stage_types([_new_record()])


def test_publish_rejected_by_webhook() -> None:
    registry = _registry(lambda _request: httpx.Response(403, text="denied"))

    with pytest.raises(PublishFailure) as excinfo:
        registry.publish_new_stage_types([_new_record()])

    assert excinfo.value.status_code == 403
    assert "denied" in str(excinfo.value)


def test_publish_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("slow", request=request)

    with pytest.raises(PublishFailure, match="slow"):
        _registry(handler).publish_new_stage_types([_new_record()])
