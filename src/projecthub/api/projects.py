"""Project catalog endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from projecthub.api.dependencies import get_project_service
from projecthub.api.schemas import (
    ProjectCreateRequest,
    ProjectResponse,
    ProjectUpdateRequest,
    UpdateIndexRequest,
)
from projecthub.domain.projects import ProjectNotFoundError, ProjectService

router = APIRouter(prefix="/projects", tags=["Projects"])
admin_router = APIRouter(prefix="/admin/projects", tags=["Admin"])


def _not_found(exc: ProjectNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


@router.get("", response_model=list[ProjectResponse])
def list_visible_projects(
    include_contributions: bool = Query(True, alias="includeContributions"),
    service: ProjectService = Depends(get_project_service),
):
    """List visible projects ordered for display."""
    return [
        ProjectResponse.from_project(project, include_contributions=include_contributions)
        for project in service.list_projects(include_hidden=False)
    ]


@admin_router.get("", response_model=list[ProjectResponse])
def list_all_projects(
    include_contributions: bool = Query(True, alias="includeContributions"),
    service: ProjectService = Depends(get_project_service),
):
    """List every project, hidden ones included."""
    return [
        ProjectResponse.from_project(project, include_contributions=include_contributions)
        for project in service.list_projects(include_hidden=True)
    ]


@router.get("/{project_id}", response_model=ProjectResponse)
def get_project(project_id: str, service: ProjectService = Depends(get_project_service)):
    try:
        project = service.get_project(project_id)
    except ProjectNotFoundError as exc:
        raise _not_found(exc) from exc
    return ProjectResponse.from_project(project)


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
def create_project(
    request: ProjectCreateRequest,
    service: ProjectService = Depends(get_project_service),
):
    """Create a project and reconcile contributions against its patterns."""
    project = service.create_project(
        name=request.name,
        description=request.description,
        visible=request.visible,
        order_index=request.order_index,
        additional_info=request.additional_info,
        repository_patterns=request.repository_patterns,
    )
    return ProjectResponse.from_project(project)


@router.put("/{project_id}", response_model=ProjectResponse)
def update_project(
    project_id: str,
    request: ProjectUpdateRequest,
    service: ProjectService = Depends(get_project_service),
):
    """Replace the editable fields of a project and reconcile."""
    try:
        project = service.update_project(
            project_id,
            name=request.name,
            description=request.description,
            additional_info=request.additional_info,
            repository_patterns=request.repository_patterns,
        )
    except ProjectNotFoundError as exc:
        raise _not_found(exc) from exc
    return ProjectResponse.from_project(project)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_project(project_id: str, service: ProjectService = Depends(get_project_service)):
    try:
        service.delete_project(project_id)
    except ProjectNotFoundError as exc:
        raise _not_found(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{project_id}/index", response_model=ProjectResponse)
def update_project_index(
    project_id: str,
    request: UpdateIndexRequest,
    service: ProjectService = Depends(get_project_service),
):
    try:
        project = service.set_order_index(project_id, request.index)
    except ProjectNotFoundError as exc:
        raise _not_found(exc) from exc
    return ProjectResponse.from_project(project)


@router.patch("/{project_id}/visibility", response_model=ProjectResponse)
def toggle_project_visibility(
    project_id: str,
    service: ProjectService = Depends(get_project_service),
):
    try:
        project = service.toggle_visibility(project_id)
    except ProjectNotFoundError as exc:
        raise _not_found(exc) from exc
    return ProjectResponse.from_project(project)
