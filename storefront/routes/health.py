"""
Storefront API — Health Check Route
=====================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   The service has no external dependencies, so a process that can answer
       is healthy. The response also reports the size of the route table.
"""

import time

from fastapi import APIRouter

from storefront import __version__
from storefront.routes import route_table
from storefront.schemas.health import HealthResponse

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Returns the health status of the service and its uptime.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        routes=len(route_table),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
