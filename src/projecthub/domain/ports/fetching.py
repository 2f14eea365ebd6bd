"""Ports for fetching external domain data."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from projecthub.domain.model import Contribution


type ContributionsByDay = Mapping[str, Sequence[Contribution]]


class ContributionFetchError(RuntimeError):
    """Raised when the contribution feed cannot deliver a usable batch."""


@runtime_checkable
class ContributionFetcher(Protocol):
    """Callable port returning the full upstream batch keyed by day."""

    def __call__(self) -> ContributionsByDay: ...


__all__ = ["ContributionFetchError", "ContributionFetcher", "ContributionsByDay"]
