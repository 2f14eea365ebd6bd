"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from projecthub import __version__
from projecthub.api import contributions, health, projects
from projecthub.app import Application, build_application
from projecthub.config import get_api_config

logger = logging.getLogger(__name__)


def create_app(
    application: Application | None = None,
    *,
    start_scheduler: bool = True,
    cors_origins: tuple[str, ...] | None = None,
) -> FastAPI:
    """Build the API around ``application`` (wired from the environment when omitted)."""
    wired = application if application is not None else build_application()
    origins = cors_origins if cors_origins is not None else get_api_config().cors_origins

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        if start_scheduler:
            wired.scheduler.start()
        try:
            yield
        finally:
            if start_scheduler:
                wired.scheduler.stop(timeout=5)

    app = FastAPI(
        title="projecthub",
        description="Project catalog with reconciled repository contributions",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.application = wired

    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(origins),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(health.router, tags=["Health"])
    app.include_router(projects.router)
    app.include_router(projects.admin_router)
    app.include_router(contributions.router)
    logger.debug("API created with scheduler=%s, cors_origins=%s", start_scheduler, origins)
    return app
