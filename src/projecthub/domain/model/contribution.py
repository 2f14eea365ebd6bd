"""Contribution value type sourced from the upstream feed."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Final

DAY_KEY: Final[str] = "day"
REPOSITORY_URL_KEY: Final[str] = "repositoryUrl"


@dataclass(frozen=True, slots=True)
class Contribution:
    """A day-stamped activity record tied to a repository URL.

    ``day`` is only ever used as a grouping key; it is never parsed as a date.
    ``extra`` holds the remaining payload fields, carried through verbatim.
    """

    day: str
    repository_url: str
    extra: Mapping[str, object] = field(default_factory=dict[str, object], hash=False)

    def as_payload(self) -> dict[str, object]:
        """Return the wire representation used by the feed, storage and API."""

        payload: dict[str, object] = dict(self.extra)
        payload[DAY_KEY] = self.day
        payload[REPOSITORY_URL_KEY] = self.repository_url
        return payload

    @classmethod
    def from_payload(cls, payload: Mapping[str, object]) -> Contribution:
        day = payload.get(DAY_KEY)
        repository_url = payload.get(REPOSITORY_URL_KEY)
        if not isinstance(day, str) or not isinstance(repository_url, str):
            raise ValueError(f"Invalid contribution payload: {dict(payload)!r}")
        extra = {
            key: value
            for key, value in payload.items()
            if key not in (DAY_KEY, REPOSITORY_URL_KEY)
        }
        return cls(day=day, repository_url=repository_url, extra=extra)
