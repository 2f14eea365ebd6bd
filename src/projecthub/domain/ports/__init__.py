"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import ContributionFetcher, ContributionFetchError, ContributionsByDay
from .persistence import ProjectRepository
from .unit_of_work import (
    ProjectRepositories,
    ProjectUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "ContributionFetchError",
    "ContributionFetcher",
    "ContributionsByDay",
    "ProjectRepositories",
    "ProjectRepository",
    "ProjectUnitOfWork",
    "RepositoryCollection",
    "UnitOfWork",
]
