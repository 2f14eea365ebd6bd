"""Ports for persisting domain aggregates."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from projecthub.domain.model import Project


@runtime_checkable
class ProjectRepository(Protocol):
    """Persistence contract for the project catalog."""

    def list_all(self) -> list[Project]: ...

    def get(self, project_id: str) -> Project | None: ...

    def save(self, project: Project) -> Project:
        """Insert ``project`` if its id is new, otherwise overwrite the stored record."""
        ...

    def delete(self, project_id: str) -> bool:
        """Remove a project, returning ``False`` when no such id exists."""
        ...
