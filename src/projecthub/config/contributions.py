"""Contribution feed configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_float, env_int, require_env_var
from .errors import ConfigurationError
from .http_resilience import ResilienceConfig, RetryPolicy

CONTRIBUTIONS_PATH = "/contributions"
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_RETRIES = 0


@dataclass(frozen=True, slots=True)
class ContributionFeedConfig:
    """Where and how to reach the upstream contribution feed."""

    resilience: ResilienceConfig
    path: str = CONTRIBUTIONS_PATH


def get_contribution_feed_config() -> ContributionFeedConfig:
    base_url = require_env_var("CONTRIBUTIONS_API_URL").strip().rstrip("/")
    timeout = env_float("CONTRIBUTIONS_API_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)
    retries = env_int("CONTRIBUTIONS_API_RETRIES", DEFAULT_RETRIES)
    if timeout <= 0:
        raise ConfigurationError("CONTRIBUTIONS_API_TIMEOUT_SECONDS must be positive")
    if retries < 0:
        raise ConfigurationError("CONTRIBUTIONS_API_RETRIES must be non-negative")

    return ContributionFeedConfig(
        resilience=ResilienceConfig(
            name="contributions",
            base_url=base_url,
            timeout_seconds=timeout,
            retry=RetryPolicy(total=retries),
            default_headers={"Accept": "application/json"},
        )
    )
