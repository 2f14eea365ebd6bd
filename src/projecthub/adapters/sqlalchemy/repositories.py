"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from sqlalchemy import select

from projecthub.adapters.sqlalchemy.mappings import project_table
from projecthub.domain.model import Project

if TYPE_CHECKING:
    from sqlalchemy.orm import Session


class SqlAlchemyProjectRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def list_all(self) -> list[Project]:
        stmt = select(Project).order_by(project_table.c.id)
        return list(self.session.execute(stmt).scalars().all())

    def get(self, project_id: str) -> Project | None:
        return self.session.get(Project, project_id)

    def save(self, project: Project) -> Project:
        return self.session.merge(project)

    def delete(self, project_id: str) -> bool:
        project = self.session.get(Project, project_id)
        if project is None:
            return False
        self.session.delete(project)
        self.session.flush()
        return True


if TYPE_CHECKING:
    from projecthub.domain.ports.persistence import ProjectRepository

    _session_stub = cast("Session", object())
    _repo_check: ProjectRepository = SqlAlchemyProjectRepository(_session_stub)
