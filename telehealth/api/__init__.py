"""API routes for the Telehealth Symptom Analysis Service."""

from fastapi import APIRouter

from telehealth.api.v1 import health, symptoms

# Create main API router
api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(symptoms.router, tags=["symptom-analysis"])

__all__ = ["api_router"]
