"""Public interface for the contribution feed adapter."""

from __future__ import annotations

from .client import ContributionFeedFetcher, build_http_contribution_fetcher
from .schema import ContributionPayload, ContributionPayloadInput, ContributionsResponse
from .translator import parse_contribution, parse_contributions_by_day

__all__ = [
    "ContributionFeedFetcher",
    "ContributionPayload",
    "ContributionPayloadInput",
    "ContributionsResponse",
    "build_http_contribution_fetcher",
    "parse_contribution",
    "parse_contributions_by_day",
]
