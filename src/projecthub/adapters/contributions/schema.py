"""Pydantic models describing the contribution feed payloads."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, RootModel


class ContributionFeedBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ContributionPayload(ContributionFeedBaseModel):
    """One contribution record; unknown fields are kept in ``model_extra``."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    day: str
    repository_url: str = Field(alias="repositoryUrl")


class ContributionsResponse(RootModel[dict[str, list[ContributionPayload]]]):
    """Top-level feed response: day-key to the contributions of that day."""


ContributionPayloadInput = ContributionPayload | Mapping[str, object]
