"""Health & Readiness Probes — liveness and store readiness.

Invariants:
    - GET /api/health always returns 200 if process is up (liveness)
    - GET /api/health/ready re-checks the store, refreshes the readiness flag,
      and returns 503 while the store is unreachable
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from taskapi.infrastructure import database

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"status": "healthy", "service": "taskapi"}


@router.get("/ready")
async def readiness_check():
    """Readiness probe — includes database connectivity."""
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "database_unavailable"},
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
