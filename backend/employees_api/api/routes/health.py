"""Health Probe: liveness endpoint for container orchestration.

Invariants:
    - GET /api/health always returns 200 if the process is up
"""

from fastapi import APIRouter, Depends, status

from employees_api.api.dependencies import get_app_settings, get_store
from employees_api.config import Settings
from employees_api.core.repository_protocols import EmployeeRepository

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check(
    store: EmployeeRepository = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
):
    """Basic liveness probe with the live record count."""
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
        "employees": len(store),
    }
