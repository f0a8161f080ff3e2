"""
Tests for symptom analysis storage.
"""

import pytest

from telehealth.schemas.common import utcnow
from telehealth.schemas.symptoms import AnalysisResult, AnalysisSource, SymptomAnalysisRecord
from telehealth.services import analysis_repository
from telehealth.services.analysis_repository import InMemorySymptomAnalysisRepository


@pytest.fixture
def analysis() -> AnalysisResult:
    return AnalysisResult(
        conditions=[],
        recommendations=["Rest and get adequate sleep", "Stay well hydrated with water and clear fluids"],
        source=AnalysisSource.LOCAL_ANALYSIS,
        timestamp=utcnow()
    )


@pytest.mark.asyncio
async def test_create_assigns_incrementing_ids(analysis: AnalysisResult):
    """Test ids start at 1 and increase."""
    repository = InMemorySymptomAnalysisRepository()

    first = await repository.create("p1", "cough", "26-35", "male", analysis)
    second = await repository.create("p1", "fever", "26-35", "male", analysis)

    assert (first.id, second.id) == (1, 2)
    assert await repository.get(2) == second
    assert await repository.get(99) is None


@pytest.mark.asyncio
async def test_recommendations_joined(analysis: AnalysisResult):
    """Test the flattened recommendation text."""
    repository = InMemorySymptomAnalysisRepository()

    record = await repository.create("p1", "cough", "26-35", "male", analysis)

    assert record.recommendations == (
        "Rest and get adequate sleep; Stay well hydrated with water and clear fluids"
    )


@pytest.mark.asyncio
async def test_list_by_patient_newest_first(analysis: AnalysisResult):
    """Test listing is scoped to the patient and ordered by recency."""
    repository = InMemorySymptomAnalysisRepository()

    await repository.create("p1", "cough", "26-35", "male", analysis)
    await repository.create("p2", "fever", "65+", "female", analysis)
    await repository.create("p1", "headache", "26-35", "male", analysis)

    records = await repository.list_by_patient("p1")

    assert [r.symptoms for r in records] == ["headache", "cough"]
    assert await repository.list_by_patient("nobody") == []


@pytest.mark.asyncio
async def test_record_json_uses_camel_case_aliases(analysis: AnalysisResult):
    """Test serialized record round-trips through its aliases."""
    repository = InMemorySymptomAnalysisRepository()
    record = await repository.create("p1", "cough", "26-35", "male", analysis)

    data = record.model_dump(mode="json", by_alias=True)

    assert data["patientId"] == "p1"
    assert "createdAt" in data
    assert data["analysis"]["source"] == "local_analysis"
    assert SymptomAnalysisRecord.model_validate(data) == record


@pytest.mark.asyncio
async def test_redis_unavailable_falls_back_to_memory(monkeypatch):
    """Test a dead Redis server degrades to in-memory storage."""
    from telehealth.config import get_settings

    monkeypatch.setenv("STORAGE_BACKEND", "redis")
    monkeypatch.setenv("REDIS_URL", "redis://127.0.0.1:1")
    get_settings.cache_clear()
    monkeypatch.setattr(analysis_repository, "_repository", None)

    try:
        repository = await analysis_repository.get_analysis_repository()
        assert repository.backend == "memory"
    finally:
        await analysis_repository.close_analysis_repository()
        monkeypatch.undo()
        get_settings.cache_clear()
