"""
Request authentication for the Telehealth Symptom Analysis Service.

Callers authenticate the service with an API key; the upstream gateway
that owns user sessions forwards the authenticated patient id.
"""

from fastapi import HTTPException, Security, status
from fastapi.security import APIKeyHeader

from telehealth.config import get_settings

api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)
patient_id_header = APIKeyHeader(name="X-Patient-Id", auto_error=False)


async def verify_api_key(api_key: str | None = Security(api_key_header)) -> str:
    """
    Verify the API key from the X-API-Key header.

    Args:
        api_key: The API key from the request header.

    Returns:
        The validated API key.

    Raises:
        HTTPException: If API key is missing or invalid.
    """
    settings = get_settings()

    # If no API key is configured, reject all requests
    if not settings.SERVICE_API_KEY:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="API key not configured on server"
        )

    if not api_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="API key required",
            headers={"WWW-Authenticate": "ApiKey"}
        )

    if api_key != settings.SERVICE_API_KEY:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid API key"
        )

    return api_key


async def get_patient_id(patient_id: str | None = Security(patient_id_header)) -> str:
    """Resolve the patient on whose behalf the request is made."""
    if not patient_id or not patient_id.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Patient identity required"
        )
    return patient_id.strip()
