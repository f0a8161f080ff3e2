"""
Health check and monitoring endpoints.
"""

import time

from fastapi import APIRouter
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from telehealth.config import get_settings
from telehealth.schemas.common import HealthResponse, utcnow
from telehealth.services.analysis_repository import get_analysis_repository

router = APIRouter()

# Track startup time
_startup_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Check service health and storage availability.

    No authentication required for health checks.
    """
    settings = get_settings()
    repository = await get_analysis_repository()

    return HealthResponse(
        service=settings.APP_NAME,
        version=settings.APP_VERSION,
        status="healthy",
        timestamp=utcnow(),
        openai_configured=settings.openai_configured,
        storage_backend=repository.backend,
        storage_connected=repository.is_connected,
        uptime_seconds=time.time() - _startup_time
    )


@router.get("/metrics")
async def prometheus_metrics():
    """
    Expose Prometheus metrics.

    No authentication for metrics endpoint.
    """
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )
