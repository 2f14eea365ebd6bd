"""Translate contribution feed payloads into domain values."""

from __future__ import annotations

from projecthub.domain.model import Contribution

from .schema import ContributionPayload, ContributionPayloadInput, ContributionsResponse


def parse_contribution(payload: ContributionPayloadInput) -> Contribution:
    """Convert a feed record into a ``Contribution``, keeping unknown fields."""

    model = (
        payload
        if isinstance(payload, ContributionPayload)
        else ContributionPayload.model_validate(payload)
    )
    extra = dict(model.model_extra or {})
    return Contribution(day=model.day, repository_url=model.repository_url, extra=extra)


def parse_contributions_by_day(response: ContributionsResponse) -> dict[str, list[Contribution]]:
    return {
        day: [parse_contribution(item) for item in items]
        for day, items in response.root.items()
    }
