"""Core modules for the Telehealth Symptom Analysis Service."""

from telehealth.core.auth import get_patient_id, verify_api_key
from telehealth.core.logging import get_logger, setup_logging
from telehealth.core.rate_limit import limiter, get_remote_address

__all__ = [
    "verify_api_key",
    "get_patient_id",
    "get_logger",
    "setup_logging",
    "limiter",
    "get_remote_address",
]
