"""
Symptom Analysis Schemas

Pydantic models for the symptom checker: patient input, the static
condition catalog, scored conditions, analysis results and the persisted
analysis record returned to the frontend.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from telehealth.schemas.common import utcnow

DEFAULT_AGE_BRACKET = "26-35"
DEFAULT_GENDER = "male"


# ============================================================================
# ENUMS
# ============================================================================

class AgeBracket(str, Enum):
    """Closed set of patient age brackets."""
    AGE_18_25 = "18-25"
    AGE_26_35 = "26-35"
    AGE_36_45 = "36-45"
    AGE_46_55 = "46-55"
    AGE_56_65 = "56-65"
    AGE_65_PLUS = "65+"


class Gender(str, Enum):
    """Patient gender as reported on the intake form."""
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class AnalysisSource(str, Enum):
    """Strategy that produced an analysis."""
    OPENAI = "openai"
    LOCAL_ANALYSIS = "local_analysis"


# ============================================================================
# CORE MODELS
# ============================================================================

class SymptomInput(BaseModel):
    """Per-request input to the analysis service."""
    symptoms: str = Field(..., description="Free-text symptom description")
    age: str = Field(DEFAULT_AGE_BRACKET, description="Age bracket label")
    gender: str = Field(DEFAULT_GENDER, description="Patient gender")

    @field_validator("age", mode="before")
    @classmethod
    def _default_age(cls, value):
        if value is None or value == "":
            return DEFAULT_AGE_BRACKET
        return value.value if isinstance(value, Enum) else value

    @field_validator("gender", mode="before")
    @classmethod
    def _default_gender(cls, value):
        if value is None or value == "":
            return DEFAULT_GENDER
        return value.value if isinstance(value, Enum) else value


class ConditionCatalogEntry(BaseModel):
    """Static condition with a prior probability and trigger keywords."""
    name: str = Field(..., description="Condition label")
    base_probability: int = Field(..., ge=0, le=100, description="Prior likelihood")
    description: str = Field(..., description="Patient-facing clinical description")
    keywords: tuple[str, ...] = Field(..., description="Lowercase trigger substrings")

    class Config:
        frozen = True


class ScoredCondition(BaseModel):
    """Condition ranked for a single analysis."""
    name: str = Field(..., description="Condition name")
    probability: int | float = Field(..., ge=0, description="Probability percentage")
    description: str = Field(..., description="Brief description")

    class Config:
        frozen = True


class AnalysisResult(BaseModel):
    """Outcome of one symptom analysis."""
    conditions: list[ScoredCondition] = Field(default_factory=list, description="Ranked conditions")
    recommendations: list[str] = Field(default_factory=list, description="Ordered care advice")
    source: AnalysisSource = Field(..., description="Strategy that produced the result")
    timestamp: datetime = Field(default_factory=utcnow, description="Creation time (UTC)")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "conditions": [
                    {
                        "name": "Viral Upper Respiratory Infection",
                        "probability": 95,
                        "description": "Common cold symptoms including nasal congestion, runny nose, and mild fever."
                    }
                ],
                "recommendations": [
                    "Rest and get adequate sleep",
                    "Stay well hydrated with water and clear fluids"
                ],
                "source": "local_analysis",
                "timestamp": "2024-01-15T10:30:00Z"
            }
        }


# ============================================================================
# API MODELS
# ============================================================================

class SymptomAnalysisRequest(BaseModel):
    """Request model for symptom analysis."""
    symptoms: str = Field(..., description="Free-text symptom description")
    age: Optional[AgeBracket] = Field(None, description="Age bracket, defaults to 26-35")
    gender: Optional[Gender] = Field(None, description="Gender, defaults to male")

    class Config:
        json_schema_extra = {
            "example": {
                "symptoms": "runny nose and sneezing",
                "age": "26-35",
                "gender": "female"
            }
        }

    @field_validator("age", "gender", mode="before")
    @classmethod
    def _blank_selection(cls, value):
        # Untouched selects arrive as ""
        return None if value == "" else value

    def to_input(self) -> SymptomInput:
        return SymptomInput(symptoms=self.symptoms, age=self.age, gender=self.gender)


class SymptomAnalysisRecord(BaseModel):
    """Persisted symptom analysis as returned to the patient."""
    id: int = Field(..., description="Record id")
    patient_id: str = Field(..., alias="patientId", description="Owning patient")
    symptoms: str = Field(..., description="Submitted symptom text")
    age: str = Field(..., description="Age bracket used for the analysis")
    gender: str = Field(..., description="Gender used for the analysis")
    analysis: AnalysisResult = Field(..., description="Analysis result")
    recommendations: str = Field(..., description="Recommendations joined with '; '")
    created_at: datetime = Field(default_factory=utcnow, alias="createdAt")

    class Config:
        populate_by_name = True
