"""Public domain model surface."""

from __future__ import annotations

from projecthub.domain.model.contribution import Contribution
from projecthub.domain.model.project import Project, new_project_id

__all__ = [
    "Contribution",
    "Project",
    "new_project_id",
]
