"""Application configuration helpers."""

from __future__ import annotations

from .api import ApiConfig, get_api_config
from .contributions import ContributionFeedConfig, get_contribution_feed_config
from .env import env_float, env_int, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .reconciliation import ReconciliationConfig, get_reconciliation_config
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config

__all__ = [
    "ApiConfig",
    "ConfigurationError",
    "ContributionFeedConfig",
    "DatabaseConfig",
    "MissingConfigurationError",
    "ReconciliationConfig",
    "ResilienceConfig",
    "RetryPolicy",
    "StorageConfig",
    "configure_logging",
    "env_float",
    "env_int",
    "get_api_config",
    "get_contribution_feed_config",
    "get_database_config",
    "get_reconciliation_config",
    "get_storage_config",
    "require_env_var",
    "require_env_vars",
]
