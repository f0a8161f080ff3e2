"""
Pytest fixtures for the Telehealth Symptom Analysis Service tests.
"""

import uuid

import pytest
from fastapi.testclient import TestClient

# Set environment variables before imports
import os
os.environ["SERVICE_API_KEY"] = "test-api-key-12345"
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["OPENAI_API_KEY"] = ""
os.environ["DEBUG"] = "true"

from telehealth.main import app
from telehealth.schemas.symptoms import SymptomInput


@pytest.fixture
def test_client():
    """Create synchronous test client."""
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def api_key_headers():
    """Headers with valid API key."""
    return {"X-API-Key": "test-api-key-12345"}


@pytest.fixture
def patient_headers(api_key_headers: dict):
    """Headers for a fresh patient, isolated from other tests."""
    return {**api_key_headers, "X-Patient-Id": f"patient-{uuid.uuid4().hex[:8]}"}


@pytest.fixture
def cold_input() -> SymptomInput:
    """Typical upper respiratory presentation."""
    return SymptomInput(symptoms="runny nose and sneezing", age="26-35", gender="female")
