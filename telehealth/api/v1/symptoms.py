"""
Symptom analysis endpoints.

Patients submit free-text symptoms, receive a ranked list of possible
conditions with care recommendations, and can revisit past analyses.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from starlette.requests import Request

from telehealth.core.auth import get_patient_id, verify_api_key
from telehealth.core.logging import get_logger
from telehealth.core.rate_limit import get_analysis_rate_limit, limiter
from telehealth.dependencies import get_symptom_analysis_service
from telehealth.schemas.symptoms import (
    ConditionCatalogEntry,
    SymptomAnalysisRecord,
    SymptomAnalysisRequest,
)
from telehealth.services.analysis_repository import (
    SymptomAnalysisRepository,
    get_analysis_repository,
)
from telehealth.services.condition_catalog import get_condition_catalog
from telehealth.services.symptom_analysis import SymptomAnalysisService

logger = get_logger(__name__)

router = APIRouter(
    prefix="/symptom-analysis",
    dependencies=[Depends(verify_api_key)]
)


@router.post(
    "",
    response_model=SymptomAnalysisRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Analyze Symptoms",
    description="""
    Rank likely conditions for a free-text symptom description.

    Uses OpenAI when a key is configured and falls back to the local
    keyword analysis on any failure. The result is stored for the patient.
    """
)
@limiter.limit(get_analysis_rate_limit)
async def create_symptom_analysis(
    request: Request,
    body: SymptomAnalysisRequest,
    patient_id: str = Depends(get_patient_id),
    service: SymptomAnalysisService = Depends(get_symptom_analysis_service),
    repository: SymptomAnalysisRepository = Depends(get_analysis_repository)
):
    """
    Analyze symptoms and persist the result.

    Args:
        body: Symptom text with optional age bracket and gender.

    Returns:
        The stored analysis record.
    """
    if not body.symptoms or not body.symptoms.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Symptoms are required"
        )

    try:
        symptom_input = body.to_input()
        analysis = await service.analyze_symptoms(symptom_input)

        record = await repository.create(
            patient_id=patient_id,
            symptoms=symptom_input.symptoms,
            age=symptom_input.age,
            gender=symptom_input.gender,
            analysis=analysis
        )

        logger.info(
            "Symptom analysis complete",
            extra={
                "analysis_id": record.id,
                "source": analysis.source.value,
                "conditions_found": len(analysis.conditions)
            }
        )

        return record

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Symptom analysis failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create symptom analysis"
        )


@router.get(
    "",
    response_model=list[SymptomAnalysisRecord],
    summary="List Symptom Analyses"
)
async def list_symptom_analyses(
    patient_id: str = Depends(get_patient_id),
    repository: SymptomAnalysisRepository = Depends(get_analysis_repository)
):
    """Return the patient's analyses, newest first."""
    try:
        return await repository.list_by_patient(patient_id)
    except Exception as e:
        logger.error(f"Fetching symptom analyses failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch symptom analyses"
        )


@router.get(
    "/catalog",
    response_model=list[ConditionCatalogEntry],
    summary="Condition Catalog"
)
async def get_catalog():
    """Conditions the local analyzer can suggest."""
    return list(get_condition_catalog())


@router.get(
    "/{analysis_id}",
    response_model=SymptomAnalysisRecord,
    summary="Get Symptom Analysis"
)
async def get_symptom_analysis(
    analysis_id: int,
    patient_id: str = Depends(get_patient_id),
    repository: SymptomAnalysisRepository = Depends(get_analysis_repository)
):
    """Return one of the patient's analyses."""
    try:
        record = await repository.get(analysis_id)
    except Exception as e:
        logger.error(f"Fetching symptom analysis failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch symptom analysis"
        )

    # Other patients' records are reported as missing
    if record is None or record.patient_id != patient_id:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Symptom analysis not found"
        )

    return record
