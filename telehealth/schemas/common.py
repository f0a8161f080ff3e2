"""
Common schemas used across multiple endpoints.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field


def utcnow() -> datetime:
    """Timezone-aware current UTC time."""
    return datetime.now(timezone.utc)


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    timestamp: datetime = Field(default_factory=utcnow)

    class Config:
        json_schema_extra = {
            "example": {
                "error": "InternalServerError",
                "message": "An unexpected error occurred",
                "timestamp": "2024-01-15T10:30:00Z"
            }
        }


class HealthResponse(BaseModel):
    """Health check response."""

    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
    status: str = Field(..., description="Service status")
    timestamp: datetime = Field(default_factory=utcnow)
    openai_configured: bool = Field(
        default=False,
        description="Whether remote analysis will be attempted"
    )
    storage_backend: str = Field(..., description="Active analysis storage backend")
    storage_connected: bool = Field(default=False, description="Storage connection status")
    uptime_seconds: float = Field(default=0, description="Service uptime")

    class Config:
        json_schema_extra = {
            "example": {
                "service": "Telehealth Symptom Analysis Service",
                "version": "1.0.0",
                "status": "healthy",
                "timestamp": "2024-01-15T10:30:00Z",
                "openai_configured": False,
                "storage_backend": "memory",
                "storage_connected": True,
                "uptime_seconds": 3600.5
            }
        }
