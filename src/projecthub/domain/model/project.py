"""Project aggregate."""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import uuid4

from projecthub.domain.model.contribution import Contribution


def new_project_id() -> str:
    return str(uuid4())


@dataclass(eq=False, kw_only=True)
class Project:
    """A catalog entry that claims repositories through ``repository_patterns``.

    ``contributions`` is owned by the reconciliation pass; every other field is
    edited directly through the project service.
    """

    id: str = field(default_factory=new_project_id)
    name: str = ""
    description: str = ""
    visible: bool = True
    order_index: int | None = None
    additional_info: dict[str, str] = field(default_factory=dict[str, str])
    repository_patterns: list[str] = field(default_factory=list[str])
    contributions: list[Contribution] = field(default_factory=list[Contribution])

    def __repr__(self) -> str:
        return f"Project(id={self.id!r}, name={self.name!r})"
