"""
Rate limiting configuration using SlowAPI.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from telehealth.config import get_settings


def _get_rate_limit_key(request: Request) -> str:
    """
    Get rate limit key based on patient, API key or IP address.

    Patients behind the same gateway key are limited individually.
    """
    patient_id = request.headers.get("X-Patient-Id")
    if patient_id:
        return f"patient:{patient_id}"

    api_key = request.headers.get("X-API-Key")
    if api_key:
        return f"api_key:{api_key[:8]}..."

    return get_remote_address(request)


def get_rate_limit_string() -> str:
    """Get the default rate limit string from settings."""
    settings = get_settings()
    return f"{settings.RATE_LIMIT_REQUESTS}/{settings.RATE_LIMIT_WINDOW} seconds"


def get_analysis_rate_limit() -> str:
    """Per-route limit for symptom analysis submissions."""
    return get_settings().ANALYSIS_RATE_LIMIT


limiter = Limiter(
    key_func=_get_rate_limit_key,
    default_limits=[get_rate_limit_string()]
)
