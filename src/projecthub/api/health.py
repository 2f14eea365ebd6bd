"""
Health check endpoints
"""

from datetime import UTC, datetime

from fastapi import APIRouter, Depends

from projecthub.api.dependencies import get_application
from projecthub.app import Application

router = APIRouter()


@router.get("/health")
def health_check(application: Application = Depends(get_application)):
    """Simple API health check."""
    last_result = application.scheduler.last_result
    return {
        "status": "healthy",
        "timestamp": datetime.now(UTC).isoformat(),
        "service": "projecthub",
        "schedulerRunning": application.scheduler.running,
        "unassignedContributions": len(application.unassigned_cache),
        "lastReconciliation": None
        if last_result is None
        else {"fetched": last_result.fetched, "assigned": last_result.assigned},
    }
