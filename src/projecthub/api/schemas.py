"""Request and response DTOs for the HTTP API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from collections.abc import Iterable

    from projecthub.domain.model import Contribution, Project
    from projecthub.domain.reconciliation import ReconciliationResult


class ApiModel(BaseModel):
    """Base DTO: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def contribution_payloads(contributions: Iterable[Contribution]) -> list[dict[str, Any]]:
    return [dict(contribution.as_payload()) for contribution in contributions]


class ProjectCreateRequest(ApiModel):
    name: str
    description: str = ""
    visible: bool = True
    order_index: int | None = None
    additional_info: dict[str, str] = Field(default_factory=dict)
    repository_patterns: list[str] = Field(default_factory=list)


class ProjectUpdateRequest(ApiModel):
    name: str
    description: str = ""
    additional_info: dict[str, str] | None = None
    repository_patterns: list[str] | None = None


class UpdateIndexRequest(ApiModel):
    index: int


class ProjectResponse(ApiModel):
    id: str
    name: str
    description: str
    visible: bool
    order_index: int | None = None
    additional_info: dict[str, str] = Field(default_factory=dict)
    repository_patterns: list[str] = Field(default_factory=list)
    contributions: list[dict[str, Any]] | None = None

    @classmethod
    def from_project(
        cls,
        project: Project,
        *,
        include_contributions: bool = True,
    ) -> ProjectResponse:
        return cls(
            id=project.id,
            name=project.name,
            description=project.description,
            visible=project.visible,
            order_index=project.order_index,
            additional_info=dict(project.additional_info),
            repository_patterns=list(project.repository_patterns),
            contributions=(
                contribution_payloads(project.contributions) if include_contributions else None
            ),
        )


class ReconciliationResponse(ApiModel):
    fetched: int
    assigned: int
    unassigned: int
    updated_projects: list[str] = Field(default_factory=list)
    missing_projects: list[str] = Field(default_factory=list)
    failed_projects: list[str] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: ReconciliationResult) -> ReconciliationResponse:
        return cls(
            fetched=result.fetched,
            assigned=result.assigned,
            unassigned=result.unassigned,
            updated_projects=list(result.updated_projects),
            missing_projects=list(result.missing_projects),
            failed_projects=list(result.failed_projects),
        )
