"""
Symptom analysis orchestration service.

Chooses between remote (OpenAI) and local analysis. The remote strategy is
tried once when configured; any failure falls back to the local strategy so
callers always receive a usable result.
"""

from typing import Optional

import httpx

from telehealth.config import get_settings
from telehealth.core.logging import get_logger
from telehealth.core.metrics import REMOTE_ANALYSIS_FAILURES, SYMPTOM_ANALYSES
from telehealth.schemas.symptoms import AnalysisResult, SymptomInput
from telehealth.services.base_strategy import AnalysisStrategy
from telehealth.services.local_analyzer import LocalAnalysisStrategy
from telehealth.services.openai_analyzer import OpenAIAnalysisStrategy

logger = get_logger(__name__)


class SymptomAnalysisService:
    """
    Service for turning patient symptom descriptions into analyses.
    """

    def __init__(
        self,
        remote: Optional[AnalysisStrategy] = None,
        local: Optional[AnalysisStrategy] = None
    ):
        self._remote = remote
        self._local = local or LocalAnalysisStrategy()

    @property
    def remote_enabled(self) -> bool:
        return self._remote is not None

    async def analyze_symptoms(self, symptom_input: SymptomInput) -> AnalysisResult:
        """
        Analyze symptoms with the best available strategy.

        Args:
            symptom_input: Non-empty symptom text with age bracket and gender
                (defaults already applied).

        Returns:
            Analysis result tagged with the strategy that produced it.
        """
        if self._remote is not None:
            try:
                result = await self._remote.analyze(symptom_input)
                SYMPTOM_ANALYSES.labels(source=result.source.value).inc()
                return result
            except Exception as e:
                REMOTE_ANALYSIS_FAILURES.inc()
                logger.warning(
                    f"Remote analysis failed, falling back to local analysis: {e}",
                    extra={"strategy": self._remote.name}
                )

        result = await self._local.analyze(symptom_input)
        SYMPTOM_ANALYSES.labels(source=result.source.value).inc()
        return result


def create_symptom_analysis_service(http_client: httpx.AsyncClient) -> SymptomAnalysisService:
    """Build the service from current settings."""
    settings = get_settings()

    if not settings.openai_configured:
        logger.info("OpenAI API key not configured. Using local symptom analysis.")
        return SymptomAnalysisService()

    return SymptomAnalysisService(remote=OpenAIAnalysisStrategy(http_client, settings))
