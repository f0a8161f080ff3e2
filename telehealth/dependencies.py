"""
FastAPI dependency injection utilities.
"""

from typing import Optional

import httpx

from telehealth.config import get_settings
from telehealth.core.auth import get_patient_id, verify_api_key
from telehealth.services.analysis_repository import get_analysis_repository
from telehealth.services.symptom_analysis import (
    SymptomAnalysisService,
    create_symptom_analysis_service,
)


# Global HTTP client for connection pooling
_http_client: Optional[httpx.AsyncClient] = None
_symptom_analysis_service: Optional[SymptomAnalysisService] = None


def get_http_client() -> httpx.AsyncClient:
    """Get HTTP client with connection pooling."""
    global _http_client
    settings = get_settings()

    if _http_client is None:
        _http_client = httpx.AsyncClient(
            timeout=httpx.Timeout(settings.OPENAI_TIMEOUT),
            limits=httpx.Limits(
                max_keepalive_connections=settings.HTTP_POOL_SIZE,
                keepalive_expiry=settings.HTTP_POOL_KEEPALIVE
            )
        )

    return _http_client


async def close_http_client() -> None:
    """Close the HTTP client on shutdown."""
    global _http_client, _symptom_analysis_service
    _symptom_analysis_service = None
    if _http_client is not None:
        await _http_client.aclose()
        _http_client = None


def get_symptom_analysis_service() -> SymptomAnalysisService:
    """Get the symptom analysis service instance."""
    global _symptom_analysis_service
    if _symptom_analysis_service is None:
        _symptom_analysis_service = create_symptom_analysis_service(get_http_client())
    return _symptom_analysis_service


# Re-export for convenience
__all__ = [
    "verify_api_key",
    "get_patient_id",
    "get_analysis_repository",
    "get_http_client",
    "close_http_client",
    "get_symptom_analysis_service",
]
