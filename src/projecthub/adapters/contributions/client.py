"""HTTP client for the upstream contribution feed."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from projecthub.adapters.http_resilience import ResilienceConfig, ResilientClient
from projecthub.config.contributions import ContributionFeedConfig, get_contribution_feed_config
from projecthub.domain.ports.fetching import ContributionFetcher, ContributionFetchError

from .schema import ContributionsResponse
from .translator import parse_contributions_by_day

if TYPE_CHECKING:
    from collections.abc import Callable

    from projecthub.domain.model import Contribution

log = getLogger(__name__)


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


@dataclass(slots=True)
class ContributionFeedFetcher:
    """Fetch the full contribution batch, keyed by day, in one request."""

    config: ContributionFeedConfig = field(default_factory=get_contribution_feed_config)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )

    def __call__(self) -> dict[str, list[Contribution]]:
        return asyncio.run(self._fetch_async())

    async def _fetch_async(self) -> dict[str, list[Contribution]]:
        async with self.client_factory(self.config.resilience) as client:
            payload = await self._perform_request(client)

        try:
            response = ContributionsResponse.model_validate(payload)
        except ValidationError as exc:
            log.error(f"Unexpected contribution feed payload: {exc.error_count()} errors")
            raise ContributionFetchError("Unexpected contribution feed payload") from exc

        return parse_contributions_by_day(response)

    async def _perform_request(self, client: ResilientClient) -> object:
        try:
            response = await client.get(self.config.path)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise ContributionFetchError(f"Contribution feed request failed: {exc}") from exc

        try:
            return response.json()
        except ValueError as exc:
            raise ContributionFetchError("Contribution feed returned invalid JSON") from exc


def build_http_contribution_fetcher(
    config: ContributionFeedConfig | None = None,
) -> ContributionFeedFetcher:
    if config is None:
        return ContributionFeedFetcher()
    return ContributionFeedFetcher(config=config)


if TYPE_CHECKING:
    _fetcher_check: ContributionFetcher = ContributionFeedFetcher()
