"""Pydantic schemas for request/response validation."""

from telehealth.schemas.common import (
    ErrorResponse,
    HealthResponse,
)
from telehealth.schemas.symptoms import (
    AgeBracket,
    AnalysisResult,
    AnalysisSource,
    ConditionCatalogEntry,
    Gender,
    ScoredCondition,
    SymptomAnalysisRecord,
    SymptomAnalysisRequest,
    SymptomInput,
)

__all__ = [
    # Common
    "ErrorResponse",
    "HealthResponse",
    # Symptom analysis
    "AgeBracket",
    "AnalysisResult",
    "AnalysisSource",
    "ConditionCatalogEntry",
    "Gender",
    "ScoredCondition",
    "SymptomAnalysisRecord",
    "SymptomAnalysisRequest",
    "SymptomInput",
]
