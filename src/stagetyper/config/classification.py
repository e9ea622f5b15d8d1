"""Classification settings, including the versioned exclusion policy."""

from __future__ import annotations

from dataclasses import dataclass, field

from stagetyper.domain.aggregation import DEFAULT_EXAMPLE_LIMIT
from stagetyper.domain.ranking import CONFIDENCE_TIE_EPSILON

from .env import env_list, optional_env_var
from .errors import ConfigurationError

# Version 1 excluded randommaterial, gacha and recruit only. Version 2 adds the
# weekly/sub family ("sub_"), which was already skipped by the first pipeline
# stage. Bump the version whenever the list changes: output shifts silently.
EXCLUSION_POLICY_VERSION = "2"
DEFAULT_EXCLUDE_PREFIXES: tuple[str, ...] = ("randommaterial", "gacha", "recruit", "sub_")


@dataclass(slots=True, frozen=True)
class ExclusionPolicy:
    """Stage id prefixes that never take part in classification."""

    version: str = EXCLUSION_POLICY_VERSION
    prefixes: tuple[str, ...] = DEFAULT_EXCLUDE_PREFIXES

    def __post_init__(self) -> None:
        normalized = tuple(prefix.strip().lower() for prefix in self.prefixes)
        if any(not prefix for prefix in normalized):
            raise ConfigurationError("Exclusion prefixes must be non-empty")
        object.__setattr__(self, "prefixes", normalized)

    def describe(self) -> str:
        return f"v{self.version} ({', '.join(self.prefixes) or 'none'})"


@dataclass(slots=True, frozen=True)
class ClassificationConfig:
    exclusion: ExclusionPolicy = field(default_factory=ExclusionPolicy)
    example_limit: int = DEFAULT_EXAMPLE_LIMIT
    tie_epsilon: float = CONFIDENCE_TIE_EPSILON


def get_classification_config(*, prefixes: tuple[str, ...] | None = None) -> ClassificationConfig:
    """Build the classification settings.

    ``prefixes`` (from the command line) wins over ``STAGETYPER_EXCLUDE_PREFIXES``.
    An override without ``STAGETYPER_EXCLUDE_VERSION`` is labelled ``custom``.
    """

    override = prefixes if prefixes is not None else env_list("STAGETYPER_EXCLUDE_PREFIXES")
    if override is None:
        return ClassificationConfig()
    version = optional_env_var("STAGETYPER_EXCLUDE_VERSION", "custom") or "custom"
    return ClassificationConfig(exclusion=ExclusionPolicy(version=version, prefixes=override))
