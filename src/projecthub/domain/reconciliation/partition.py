"""Split a fetched contribution batch across the project catalog."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .matching import matches_repository

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from projecthub.domain.model import Contribution, Project


@dataclass(slots=True)
class ContributionPartition:
    """Per-project filtered batches plus the contributions nobody claimed."""

    by_project: dict[str, list[Contribution]] = field(default_factory=dict)
    unassigned: tuple[Contribution, ...] = ()

    @property
    def assigned_count(self) -> int:
        return sum(len(batch) for batch in self.by_project.values())


def partition_contributions(
    contributions: Sequence[Contribution],
    projects: Iterable[Project],
) -> ContributionPartition:
    """Assign every contribution to each project whose patterns match it.

    A contribution matching several projects is assigned to all of them. Batch
    order is preserved both within each project batch and in ``unassigned``.
    Every project gets an entry, even when nothing matches it.
    """

    claimed = [False] * len(contributions)
    by_project: dict[str, list[Contribution]] = {}

    for project in projects:
        patterns = project.repository_patterns
        batch: list[Contribution] = []
        for index, contribution in enumerate(contributions):
            if matches_repository(contribution.repository_url, patterns):
                batch.append(contribution)
                claimed[index] = True
        by_project[project.id] = batch

    unassigned = tuple(
        contribution
        for contribution, was_claimed in zip(contributions, claimed, strict=True)
        if not was_claimed
    )
    return ContributionPartition(by_project=by_project, unassigned=unassigned)
