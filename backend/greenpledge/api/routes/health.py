"""Health Probes — liveness and database readiness.

Invariants:
    - GET /api/health/ answers 200 whenever the process can serve requests
    - GET /api/health/ready answers 503 until the database accepts queries
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from greenpledge.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/health", tags=["health"])

SERVICE_NAME = "greenpledge-api"
SERVICE_VERSION = "1.0.0"


@router.get("/")
async def liveness():
    return {"status": "healthy", "service": SERVICE_NAME, "version": SERVICE_VERSION}


@router.get("/ready")
async def readiness():
    manager = database.db_manager
    if manager is None or not await manager.health_check():
        logger.warning("Readiness probe failed: database unavailable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "database_unavailable"},
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
