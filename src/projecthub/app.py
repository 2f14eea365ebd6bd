"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from projecthub.adapters.contributions import build_http_contribution_fetcher
from projecthub.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyProjectUnitOfWork,
    is_started,
    startup,
)
from projecthub.config import get_reconciliation_config
from projecthub.domain.ports.unit_of_work import ProjectUnitOfWork
from projecthub.domain.projects import ProjectService
from projecthub.domain.reconciliation import (
    ReconciliationEngine,
    ReconciliationResult,
    UnassignedContributionCache,
)
from projecthub.scheduler import ReconciliationScheduler

if TYPE_CHECKING:
    from projecthub.domain.model import Project
    from projecthub.domain.ports.fetching import ContributionFetcher

UnitOfWorkFactory = Callable[[], ProjectUnitOfWork]


log = getLogger(__name__)


@dataclass(slots=True)
class Application:
    """Wired services shared by the HTTP API and the CLI."""

    engine: ReconciliationEngine
    scheduler: ReconciliationScheduler
    projects: ProjectService
    unassigned_cache: UnassignedContributionCache


def _default_unit_of_work_factory() -> UnitOfWorkFactory:
    if not is_started():
        startup()
    return SqlAlchemyProjectUnitOfWork


def build_application(
    *,
    fetcher: ContributionFetcher | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    interval_seconds: float | None = None,
) -> Application:
    """Wire the reconciliation engine, scheduler and project service."""

    effective_uow = (
        unit_of_work_factory if unit_of_work_factory is not None else _default_unit_of_work_factory()
    )
    effective_fetcher = fetcher if fetcher is not None else build_http_contribution_fetcher()
    interval = (
        interval_seconds
        if interval_seconds is not None
        else get_reconciliation_config().interval_seconds
    )

    cache = UnassignedContributionCache()
    engine = ReconciliationEngine(
        fetcher=effective_fetcher,
        unit_of_work_factory=effective_uow,
        unassigned_cache=cache,
    )
    scheduler = ReconciliationScheduler(engine.run_pass, interval_seconds=interval)
    projects = ProjectService(
        unit_of_work_factory=effective_uow,
        unassigned_cache=cache,
        on_catalog_change=scheduler.run_once,
    )
    return Application(
        engine=engine,
        scheduler=scheduler,
        projects=projects,
        unassigned_cache=cache,
    )


def reconcile_projects(
    *,
    fetcher: ContributionFetcher | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> ReconciliationResult:
    """Run one reconciliation pass using the configured adapters.

    Unlike the scheduler, a feed failure propagates as ``ContributionFetchError``.
    """

    effective_uow = (
        unit_of_work_factory if unit_of_work_factory is not None else _default_unit_of_work_factory()
    )
    engine = ReconciliationEngine(
        fetcher=fetcher if fetcher is not None else build_http_contribution_fetcher(),
        unit_of_work_factory=effective_uow,
        unassigned_cache=UnassignedContributionCache(),
    )
    log.info("Starting reconciliation pass")
    result = engine.run_pass()
    log.info(
        f"Finished reconciliation: fetched={result.fetched}, assigned={result.assigned}, "
        f"unassigned={result.unassigned}, failed={len(result.failed_projects)}"
    )
    return result


def list_projects(
    *,
    include_hidden: bool = True,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> list[Project]:
    """Return the catalog ordered for display."""

    effective_uow = (
        unit_of_work_factory if unit_of_work_factory is not None else _default_unit_of_work_factory()
    )
    service = ProjectService(
        unit_of_work_factory=effective_uow,
        unassigned_cache=UnassignedContributionCache(),
    )
    return service.list_projects(include_hidden=include_hidden)
