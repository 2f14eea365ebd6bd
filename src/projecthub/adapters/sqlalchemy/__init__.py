"""SQLAlchemy adapter package for projecthub."""

from __future__ import annotations

from .mappings import (
    ContributionListType,
    mapper_registry,
    project_table,
    start_mappers,
)
from .repositories import SqlAlchemyProjectRepository
from .unit_of_work import (
    SqlAlchemyProjectUnitOfWork,
    StartupError,
    shutdown,
    startup,
)

__all__ = [
    "ContributionListType",
    "SqlAlchemyProjectRepository",
    "SqlAlchemyProjectUnitOfWork",
    "StartupError",
    "mapper_registry",
    "project_table",
    "shutdown",
    "start_mappers",
    "startup",
]
