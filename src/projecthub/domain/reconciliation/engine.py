"""One reconciliation pass over the project catalog.

The engine composes the fetch port, the catalog unit of work and the pure
matching/merge helpers. It never talks to HTTP or SQL directly, so the same
pass runs against the live adapters, the CLI and in-memory test fakes.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from .merge import merge_contributions
from .partition import partition_contributions

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from projecthub.domain.model import Contribution
    from projecthub.domain.ports.fetching import ContributionFetcher
    from projecthub.domain.ports.unit_of_work import ProjectUnitOfWork

    from .cache import UnassignedContributionCache

log = getLogger(__name__)


@dataclass(slots=True, frozen=True)
class ReconciliationResult:
    """Outcome of a reconciliation pass."""

    fetched: int
    assigned: int
    unassigned: int
    updated_projects: tuple[str, ...] = ()
    missing_projects: tuple[str, ...] = ()
    failed_projects: tuple[str, ...] = ()


@dataclass(slots=True)
class ReconciliationEngine:
    """Fetch, partition, merge and persist contributions for every project."""

    fetcher: ContributionFetcher
    unit_of_work_factory: Callable[[], ProjectUnitOfWork]
    unassigned_cache: UnassignedContributionCache

    def run_pass(self) -> ReconciliationResult:
        """Run a full pass.

        Raises ``ContributionFetchError`` before touching the catalog or the
        unassigned cache when the feed is unavailable. Failures while saving a
        single project are logged and reported in the result; projects saved
        earlier in the pass stay saved.
        """

        contributions = self._fetch()
        log.info("Fetched %s contributions", len(contributions))

        with self.unit_of_work_factory() as uow:
            projects = uow.repositories.projects.list_all()

        partition = partition_contributions(contributions, projects)

        updated: list[str] = []
        missing: list[str] = []
        failed: list[str] = []
        for project_id, batch in partition.by_project.items():
            try:
                stored = self._store_contributions(project_id, batch)
            except Exception:
                log.exception("Failed to store contributions for project %s", project_id)
                failed.append(project_id)
                continue
            if stored:
                updated.append(project_id)
            else:
                log.debug("Project %s disappeared during reconciliation; skipping", project_id)
                missing.append(project_id)

        self.unassigned_cache.publish(partition.unassigned)

        result = ReconciliationResult(
            fetched=len(contributions),
            assigned=partition.assigned_count,
            unassigned=len(partition.unassigned),
            updated_projects=tuple(updated),
            missing_projects=tuple(missing),
            failed_projects=tuple(failed),
        )
        log.info(
            "Reconciliation finished: projects=%s, assigned=%s, unassigned=%s, failed=%s",
            len(updated),
            result.assigned,
            result.unassigned,
            len(failed),
        )
        return result

    def _fetch(self) -> list[Contribution]:
        contributions_by_day = self.fetcher()
        return [
            contribution
            for day_batch in contributions_by_day.values()
            for contribution in day_batch
        ]

    def _store_contributions(self, project_id: str, batch: Sequence[Contribution]) -> bool:
        with self.unit_of_work_factory() as uow:
            repository = uow.repositories.projects
            project = repository.get(project_id)
            if project is None:
                return False
            project.contributions = merge_contributions(project.contributions, batch)
            repository.save(project)
            uow.commit()
        return True
