"""
MyNotes Backend — Health Check Route
======================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Pings the configured note store and reports the result.
Who:   Called by Docker health checks, load balancers, and monitoring systems.

Status levels:
    - healthy:   store answered (HTTP 200)
    - unhealthy: store unreachable (HTTP 503, stop routing traffic)
"""

import logging
import time

from fastapi import APIRouter, Response

from mynotes import __version__
from mynotes.config import settings
from mynotes.dependencies import Store
from mynotes.schemas.note import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={
        200: {"description": "Service healthy"},
        503: {"description": "Note store unreachable"},
    },
    summary="Service health check",
)
async def health_check(response: Response, store: Store) -> HealthResponse:
    """Probes the note store with a lightweight ping (SELECT 1 for SQL)."""
    reachable = await store.ping()
    if not reachable:
        logger.warning("Health check: note store unreachable")
        response.status_code = 503

    return HealthResponse(
        status="healthy" if reachable else "unhealthy",
        version=__version__,
        store=settings.note_store,
        database="connected" if reachable else "disconnected",
        uptime_seconds=round(time.time() - _start_time, 2),
    )
