"""Application services for managing the project catalog."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from projecthub.domain.model import Project

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

    from projecthub.domain.model import Contribution
    from projecthub.domain.ports.unit_of_work import ProjectUnitOfWork
    from projecthub.domain.reconciliation import UnassignedContributionCache

log = getLogger(__name__)

type ReconciliationTrigger = Callable[[], object]


class ProjectNotFoundError(LookupError):
    """Raised when an operation targets a project id that is not in the catalog."""

    def __init__(self, project_id: str) -> None:
        super().__init__(f"Project not found: {project_id}")
        self.project_id = project_id


def _sort_key(project: Project) -> tuple[bool, int, str]:
    return (project.order_index is None, project.order_index or 0, project.name.lower())


@dataclass(slots=True)
class ProjectService:
    """CRUD over the catalog.

    ``on_catalog_change`` is invoked after a project is created or updated so
    the new repository patterns are reflected without waiting for the next
    scheduled pass.
    """

    unit_of_work_factory: Callable[[], ProjectUnitOfWork]
    unassigned_cache: UnassignedContributionCache
    on_catalog_change: ReconciliationTrigger | None = None

    def list_projects(self, *, include_hidden: bool = True) -> list[Project]:
        with self.unit_of_work_factory() as uow:
            projects = uow.repositories.projects.list_all()
        if not include_hidden:
            projects = [project for project in projects if project.visible]
        return sorted(projects, key=_sort_key)

    def get_project(self, project_id: str) -> Project:
        with self.unit_of_work_factory() as uow:
            project = uow.repositories.projects.get(project_id)
        if project is None:
            raise ProjectNotFoundError(project_id)
        return project

    def create_project(
        self,
        *,
        name: str,
        description: str = "",
        visible: bool = True,
        order_index: int | None = None,
        additional_info: Mapping[str, str] | None = None,
        repository_patterns: Iterable[str] | None = None,
    ) -> Project:
        project = Project(
            name=name,
            description=description,
            visible=visible,
            order_index=order_index,
            additional_info=dict(additional_info or {}),
            repository_patterns=list(repository_patterns or []),
        )
        with self.unit_of_work_factory() as uow:
            created = uow.repositories.projects.save(project)
            uow.commit()
        log.info("Created project %s (%s)", created.id, created.name)

        self._reconcile()
        return self._reload(created)

    def update_project(
        self,
        project_id: str,
        *,
        name: str,
        description: str,
        additional_info: Mapping[str, str] | None,
        repository_patterns: Iterable[str] | None,
    ) -> Project:
        """Replace the editable fields of a project, then reconcile.

        Reconciliation runs even when the project does not exist; the missing
        project is reported afterwards as ``ProjectNotFoundError``.
        """

        with self.unit_of_work_factory() as uow:
            repository = uow.repositories.projects
            project = repository.get(project_id)
            if project is not None:
                project.name = name
                project.description = description
                project.additional_info = dict(additional_info or {})
                project.repository_patterns = list(repository_patterns or [])
                project = repository.save(project)
                uow.commit()

        self._reconcile()
        if project is None:
            raise ProjectNotFoundError(project_id)
        log.info("Updated project %s", project_id)
        return self._reload(project)

    def delete_project(self, project_id: str) -> None:
        with self.unit_of_work_factory() as uow:
            deleted = uow.repositories.projects.delete(project_id)
            uow.commit()
        if not deleted:
            raise ProjectNotFoundError(project_id)
        log.info("Deleted project %s", project_id)

    def set_order_index(self, project_id: str, order_index: int) -> Project:
        with self.unit_of_work_factory() as uow:
            repository = uow.repositories.projects
            project = repository.get(project_id)
            if project is None:
                raise ProjectNotFoundError(project_id)
            project.order_index = order_index
            project = repository.save(project)
            uow.commit()
        return project

    def toggle_visibility(self, project_id: str) -> Project:
        with self.unit_of_work_factory() as uow:
            repository = uow.repositories.projects
            project = repository.get(project_id)
            if project is None:
                raise ProjectNotFoundError(project_id)
            project.visible = not project.visible
            project = repository.save(project)
            uow.commit()
        return project

    def get_unassigned_contributions(self) -> tuple[Contribution, ...]:
        return self.unassigned_cache.snapshot()

    def _reconcile(self) -> None:
        if self.on_catalog_change is not None:
            self.on_catalog_change()

    def _reload(self, project: Project) -> Project:
        with self.unit_of_work_factory() as uow:
            current = uow.repositories.projects.get(project.id)
        return current or project
