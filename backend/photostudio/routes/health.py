"""
PhotoStudio Backend — Health Check Route
==========================================

What:  GET /health for container health checks and uptime monitors.
How:   Pings the database through the store handle and reports whether each
       optional integration is configured (no calls to third parties).

Status levels:
    - healthy:   database reachable, all integrations configured
    - degraded:  database reachable, an integration lacks credentials
    - unhealthy: database unreachable (HTTP 503)
"""

import time

from fastapi import APIRouter, Depends, Response

from photostudio import __version__
from photostudio.routes.deps import get_email_notifier, get_image_host, get_storage
from photostudio.schemas.common import HealthResponse
from photostudio.services.email_service import EmailNotifier
from photostudio.services.image_host import ImageHostService
from photostudio.storage import Storage

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    response: Response,
    storage: Storage = Depends(get_storage),
    image_host: ImageHostService = Depends(get_image_host),
    notifier: EmailNotifier = Depends(get_email_notifier),
) -> HealthResponse:
    db_ok = await storage.ping()

    if not db_ok:
        overall = "unhealthy"
        response.status_code = 503
    elif image_host.configured and notifier.configured:
        overall = "healthy"
    else:
        overall = "degraded"

    return HealthResponse(
        status=overall,
        version=__version__,
        database="connected" if db_ok else "disconnected",
        image_host="configured" if image_host.configured else "not_configured",
        email="configured" if notifier.configured else "not_configured",
        uptime_seconds=round(time.time() - _start_time, 2),
    )
