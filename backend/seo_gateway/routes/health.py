"""
SEO Gateway — Health Check Route
=================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Checks that the bundle document exists and reports uptime.
Who:   Called by Docker health checks, load balancers, and monitoring systems.

Status levels:
    - healthy:   bundle document present (HTTP 200)
    - unhealthy: bundle document missing; every page would 500 (HTTP 503)

The metadata service is deliberately not probed: its failures only degrade
pages to the fallback fragment, they never take the site down.
"""

import logging
import time

from fastapi import APIRouter, Response

from seo_gateway import __version__
from seo_gateway.schemas.seo import HealthResponse
from seo_gateway.services.bundle_service import bundle_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Track when the service started for uptime reporting
_start_time = time.time()


@router.api_route(
    "/health",
    methods=["GET", "HEAD"],
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(response: Response) -> HealthResponse:
    """Report bundle availability and uptime."""
    if bundle_service.bundle_exists():
        bundle_status = "present"
        overall = "healthy"
    else:
        bundle_status = "missing"
        overall = "unhealthy"
        response.status_code = 503
        logger.warning("Health check: bundle document missing at %s", bundle_service.index_path)

    return HealthResponse(
        status=overall,
        version=__version__,
        bundle=bundle_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
