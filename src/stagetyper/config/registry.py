"""Stage-type registry (spreadsheet + Apps Script webhook) configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import quote

from .env import optional_env_var, require_env_var
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

SPREADSHEET_BASE_URL = "https://docs.google.com/spreadsheets/d/"
DEFAULT_SHEET_NAME = "stageInfo"
REGISTRY_TIMEOUT_SECONDS = 15.0
WEBHOOK_TIMEOUT_SECONDS = 30.0


def _read_resilience() -> ResilienceConfig:
    return ResilienceConfig(
        name="registry-read",
        base_url=SPREADSHEET_BASE_URL,
        timeout_seconds=REGISTRY_TIMEOUT_SECONDS,
    )


def _publish_resilience() -> ResilienceConfig:
    return ResilienceConfig(
        name="registry-publish",
        timeout_seconds=WEBHOOK_TIMEOUT_SECONDS,
        retry=RetryPolicy(total=0),
        ratelimit=RateLimit(max_calls=1, per_seconds=1.0),
        default_headers={"Content-Type": "application/json"},
    )


@dataclass(frozen=True)
class RegistryConfig:
    """Holds the location of the known stage-type sheet and its append webhook."""

    spreadsheet_id: str
    sheet_name: str = DEFAULT_SHEET_NAME
    webhook_url: str | None = None
    read_resilience: ResilienceConfig = field(default_factory=_read_resilience)
    publish_resilience: ResilienceConfig = field(default_factory=_publish_resilience)

    @property
    def csv_path(self) -> str:
        """Path (relative to the spreadsheet base URL) of the sheet's CSV export."""

        return f"{self.spreadsheet_id}/gviz/tq?tqx=out:csv&sheet={quote(self.sheet_name)}"

    @property
    def edit_url(self) -> str:
        return f"{SPREADSHEET_BASE_URL}{self.spreadsheet_id}/edit#gid=0"


def get_registry_config() -> RegistryConfig:
    return RegistryConfig(
        spreadsheet_id=require_env_var("STAGETYPER_SPREADSHEET_ID"),
        sheet_name=optional_env_var("STAGETYPER_SHEET_NAME", DEFAULT_SHEET_NAME)
        or DEFAULT_SHEET_NAME,
        webhook_url=optional_env_var("GAS_WEBHOOK_URL"),
    )
