"""Contribution endpoints."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from projecthub.api.dependencies import get_application
from projecthub.api.schemas import ReconciliationResponse, contribution_payloads
from projecthub.app import Application
from projecthub.domain.ports.fetching import ContributionFetchError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/contributions", tags=["Contributions"])


@router.get("/unassigned", response_model=list[dict[str, Any]])
def get_unassigned_contributions(application: Application = Depends(get_application)):
    """Contributions from the latest pass that matched no project."""
    return contribution_payloads(application.projects.get_unassigned_contributions())


@router.post("/reconcile", response_model=ReconciliationResponse)
def reconcile(application: Application = Depends(get_application)):
    """Run a reconciliation pass now."""
    try:
        result = application.scheduler.run_now()
    except ContributionFetchError as exc:
        logger.warning("Manual reconciliation failed: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Contribution feed unavailable: {exc}",
        ) from exc
    return ReconciliationResponse.from_result(result)
