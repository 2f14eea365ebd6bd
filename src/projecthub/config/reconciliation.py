"""Reconciliation scheduling defaults."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_float
from .errors import ConfigurationError

DEFAULT_RECONCILIATION_INTERVAL_SECONDS = 120.0


@dataclass(frozen=True, slots=True)
class ReconciliationConfig:
    interval_seconds: float = DEFAULT_RECONCILIATION_INTERVAL_SECONDS


def get_reconciliation_config() -> ReconciliationConfig:
    interval = env_float("RECONCILIATION_INTERVAL_SECONDS", DEFAULT_RECONCILIATION_INTERVAL_SECONDS)
    if interval <= 0:
        raise ConfigurationError("RECONCILIATION_INTERVAL_SECONDS must be positive")
    return ReconciliationConfig(interval_seconds=interval)
