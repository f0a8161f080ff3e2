"""Services for the Telehealth Symptom Analysis Service."""

from telehealth.services.analysis_repository import (
    InMemorySymptomAnalysisRepository,
    RedisSymptomAnalysisRepository,
    SymptomAnalysisRepository,
)
from telehealth.services.local_analyzer import (
    LocalAnalysisStrategy,
    derive_recommendations,
    score_conditions,
)
from telehealth.services.openai_analyzer import OpenAIAnalysisStrategy, RemoteAnalysisError
from telehealth.services.symptom_analysis import SymptomAnalysisService

__all__ = [
    "SymptomAnalysisService",
    "LocalAnalysisStrategy",
    "OpenAIAnalysisStrategy",
    "RemoteAnalysisError",
    "score_conditions",
    "derive_recommendations",
    "SymptomAnalysisRepository",
    "InMemorySymptomAnalysisRepository",
    "RedisSymptomAnalysisRepository",
]
