"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET /health always returns 200 if the process is up, never touches storage
    - GET /health/ready returns 503 if the database is unreachable

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.infrastructure.database import DatabaseSessionManager, get_db_manager

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"status": "OK", "message": "API Academia funcionando!"}


@router.get("/ready")
async def readiness_check(
    db_manager: DatabaseSessionManager = Depends(get_db_manager),
):
    """Readiness probe, includes database connectivity."""
    if not await db_manager.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
