"""
Warehouse Backend — Liveness and Health Routes
================================================

What:  ``GET /`` answers with a plain-text confirmation that the process is
       up. ``GET /health`` additionally checks the database.
Who:   Humans checking a deployment, container health checks, load balancers.

Status levels for /health:
    - healthy:   database reachable (HTTP 200)
    - unhealthy: database unreachable (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter, Response
from fastapi.responses import PlainTextResponse
from sqlalchemy import text

from warehouse import __version__
from warehouse.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

LIVENESS_MESSAGE = "Warehouse Backend is running"

_start_time = time.time()


@router.get(
    "/",
    response_class=PlainTextResponse,
    summary="Liveness check",
)
async def root() -> str:
    return LIVENESS_MESSAGE


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
    description="Reports service status and database connectivity (SELECT 1).",
)
async def health_check(response: Response) -> HealthResponse:
    """
    Check the health of the service and its database.

    Database: executes SELECT 1 on a pooled connection.
    """
    db_status = "connected"
    overall = "healthy"

    try:
        from warehouse.database import engine
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))
        response.status_code = 503

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
