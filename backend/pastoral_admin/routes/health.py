"""
Pastoral Admin Backend — Health Check Route
=============================================

What:  Liveness/readiness probe for containers and load balancers.
How:   Runs SELECT 1 on the application's engine and reports uptime.
Who:   Docker health checks and monitoring; exempt from rate limiting,
       access logging and the admin key.

Status:
    healthy:    database reachable
    unhealthy:  database unreachable (every admin route would fail)
"""

import logging
import time

from fastapi import APIRouter, Request
from sqlalchemy import text

from pastoral_admin import __version__
from pastoral_admin.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(request: Request) -> HealthResponse:
    db_status = "connected"
    overall = "healthy"

    try:
        async with request.app.state.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", e)

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
