"""API v1 routes."""

from telehealth.api.v1 import health, symptoms

__all__ = ["health", "symptoms"]
