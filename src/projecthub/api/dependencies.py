"""FastAPI dependencies resolving the wired application."""

from fastapi import Depends, Request

from projecthub.app import Application
from projecthub.domain.projects import ProjectService


def get_application(request: Request) -> Application:
    return request.app.state.application


def get_project_service(application: Application = Depends(get_application)) -> ProjectService:
    return application.projects
