"""
Tests for symptom analysis endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from telehealth.dependencies import get_symptom_analysis_service
from telehealth.main import app
from telehealth.schemas.symptoms import AnalysisResult, SymptomInput
from telehealth.services.base_strategy import AnalysisStrategy
from telehealth.services.openai_analyzer import RemoteAnalysisError
from telehealth.services.symptom_analysis import SymptomAnalysisService


class BrokenRemote(AnalysisStrategy):
    def __init__(self):
        super().__init__("broken")

    async def analyze(self, symptom_input: SymptomInput) -> AnalysisResult:
        raise RemoteAnalysisError("OpenAI API error: 503")


def test_analysis_requires_api_key(test_client: TestClient):
    """Test endpoint requires API key."""
    response = test_client.post(
        "/api/v1/symptom-analysis",
        json={"symptoms": "cough"},
        headers={"X-Patient-Id": "p1"}
    )

    assert response.status_code == 401


def test_analysis_rejects_invalid_api_key(test_client: TestClient):
    """Test endpoint rejects invalid API key."""
    response = test_client.post(
        "/api/v1/symptom-analysis",
        json={"symptoms": "cough"},
        headers={"X-API-Key": "invalid-key", "X-Patient-Id": "p1"}
    )

    assert response.status_code == 403


def test_analysis_requires_patient(test_client: TestClient, api_key_headers: dict):
    """Test patient identity is mandatory."""
    response = test_client.post(
        "/api/v1/symptom-analysis",
        json={"symptoms": "cough"},
        headers=api_key_headers
    )

    assert response.status_code == 401


def test_create_analysis(test_client: TestClient, patient_headers: dict):
    """Test a local analysis is created and returned."""
    response = test_client.post(
        "/api/v1/symptom-analysis",
        json={"symptoms": "runny nose and sneezing", "age": "26-35", "gender": "female"},
        headers=patient_headers
    )

    assert response.status_code == 201
    data = response.json()

    assert data["patientId"] == patient_headers["X-Patient-Id"]
    assert data["symptoms"] == "runny nose and sneezing"
    assert data["age"] == "26-35"
    assert data["gender"] == "female"
    assert "id" in data
    assert "createdAt" in data

    analysis = data["analysis"]
    assert analysis["source"] == "local_analysis"
    assert [(c["name"], c["probability"]) for c in analysis["conditions"]] == [
        ("Viral Upper Respiratory Infection", 95),
        ("Allergic Rhinitis", 75),
        ("Influenza (Flu)", 60),
    ]
    assert "timestamp" in analysis
    assert data["recommendations"] == "; ".join(analysis["recommendations"])


def test_create_analysis_applies_defaults(test_client: TestClient, patient_headers: dict):
    """Test age and gender defaults."""
    response = test_client.post(
        "/api/v1/symptom-analysis",
        json={"symptoms": "fever"},
        headers=patient_headers
    )

    assert response.status_code == 201
    data = response.json()
    assert data["age"] == "26-35"
    assert data["gender"] == "male"
    assert data["analysis"]["conditions"][0] == {
        "name": "Influenza (Flu)",
        "probability": 75,
        "description": (
            "Viral infection causing fever, body aches, fatigue, and respiratory symptoms. "
            "More severe than common cold."
        ),
    }


def test_create_analysis_defaults_blank_selections(test_client: TestClient, patient_headers: dict):
    """Test empty age and gender selections fall back to defaults."""
    response = test_client.post(
        "/api/v1/symptom-analysis",
        json={"symptoms": "fever", "age": "", "gender": ""},
        headers=patient_headers
    )

    assert response.status_code == 201
    data = response.json()
    assert data["age"] == "26-35"
    assert data["gender"] == "male"
    assert data["analysis"]["conditions"][0]["probability"] == 75


@pytest.mark.parametrize("symptoms", ["", "   "])
def test_create_analysis_rejects_empty_symptoms(test_client: TestClient, patient_headers: dict, symptoms: str):
    """Test blank symptom text is a bad request."""
    response = test_client.post(
        "/api/v1/symptom-analysis",
        json={"symptoms": symptoms},
        headers=patient_headers
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Symptoms are required"


@pytest.mark.parametrize("body", [
    {},
    {"symptoms": "cough", "age": "40"},
    {"symptoms": "cough", "gender": "unknown"},
])
def test_create_analysis_validates_body(test_client: TestClient, patient_headers: dict, body: dict):
    """Test missing symptoms and values outside the enumerations."""
    response = test_client.post("/api/v1/symptom-analysis", json=body, headers=patient_headers)

    assert response.status_code == 422


def test_create_analysis_falls_back_when_remote_fails(test_client: TestClient, patient_headers: dict):
    """Test a failing remote strategy still yields a local analysis."""
    app.dependency_overrides[get_symptom_analysis_service] = (
        lambda: SymptomAnalysisService(remote=BrokenRemote())
    )

    response = test_client.post(
        "/api/v1/symptom-analysis",
        json={"symptoms": "fever, chills, body aches", "age": "65+"},
        headers=patient_headers
    )

    assert response.status_code == 201
    analysis = response.json()["analysis"]
    assert analysis["source"] == "local_analysis"
    assert analysis["conditions"][0]["name"] == "Influenza (Flu)"
    assert analysis["conditions"][0]["probability"] == 95
    assert "Monitor symptoms closely and seek medical attention if worsening" in analysis["recommendations"]


def test_list_and_get_analyses(test_client: TestClient, patient_headers: dict):
    """Test patients can list and fetch their own analyses."""
    created = [
        test_client.post(
            "/api/v1/symptom-analysis",
            json={"symptoms": symptoms},
            headers=patient_headers
        ).json()
        for symptoms in ("cough", "headache")
    ]

    response = test_client.get("/api/v1/symptom-analysis", headers=patient_headers)
    assert response.status_code == 200
    assert [r["id"] for r in response.json()] == [created[1]["id"], created[0]["id"]]

    response = test_client.get(f"/api/v1/symptom-analysis/{created[0]['id']}", headers=patient_headers)
    assert response.status_code == 200
    assert response.json()["symptoms"] == "cough"


def test_get_other_patients_analysis_not_found(
    test_client: TestClient,
    patient_headers: dict,
    api_key_headers: dict
):
    """Test records are not visible to other patients."""
    created = test_client.post(
        "/api/v1/symptom-analysis",
        json={"symptoms": "cough"},
        headers=patient_headers
    ).json()

    other = {**api_key_headers, "X-Patient-Id": "someone-else"}
    response = test_client.get(f"/api/v1/symptom-analysis/{created['id']}", headers=other)

    assert response.status_code == 404


def test_get_missing_analysis(test_client: TestClient, patient_headers: dict):
    """Test unknown ids return 404."""
    response = test_client.get("/api/v1/symptom-analysis/999999", headers=patient_headers)

    assert response.status_code == 404
    assert response.json()["detail"] == "Symptom analysis not found"


def test_catalog_endpoint(test_client: TestClient, api_key_headers: dict):
    """Test the catalog is exposed read-only."""
    response = test_client.get("/api/v1/symptom-analysis/catalog", headers=api_key_headers)

    assert response.status_code == 200
    data = response.json()
    assert len(data) == 8
    assert data[0]["name"] == "Viral Upper Respiratory Infection"
    assert data[0]["base_probability"] == 70
    assert "runny nose" in data[0]["keywords"]
