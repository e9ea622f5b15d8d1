"""Application configuration helpers."""

from __future__ import annotations

from .classification import (
    DEFAULT_EXCLUDE_PREFIXES,
    EXCLUSION_POLICY_VERSION,
    ClassificationConfig,
    ExclusionPolicy,
    get_classification_config,
)
from .env import env_list, optional_env_var, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .registry import RegistryConfig, get_registry_config
from .storage import StorageConfig, get_storage_config

__all__ = [
    "DEFAULT_EXCLUDE_PREFIXES",
    "EXCLUSION_POLICY_VERSION",
    "ClassificationConfig",
    "ConfigurationError",
    "ExclusionPolicy",
    "MissingConfigurationError",
    "RateLimit",
    "RegistryConfig",
    "ResilienceConfig",
    "RetryPolicy",
    "StorageConfig",
    "env_list",
    "get_classification_config",
    "get_registry_config",
    "get_storage_config",
    "optional_env_var",
    "require_env_var",
    "require_env_vars",
]
