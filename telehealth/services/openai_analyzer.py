"""
Remote symptom analysis through the OpenAI chat completions API.
"""

from typing import Any, Optional

import httpx
from pydantic import BaseModel, ValidationError

from telehealth.config import Settings, get_settings
from telehealth.core.logging import get_logger
from telehealth.schemas.common import utcnow
from telehealth.schemas.symptoms import (
    AnalysisResult,
    AnalysisSource,
    ScoredCondition,
    SymptomInput,
)
from telehealth.services.base_strategy import AnalysisStrategy

logger = get_logger(__name__)


SYSTEM_PROMPT = (
    "You are a medical assistant providing preliminary symptom analysis. "
    "Always remind users to consult healthcare professionals."
)

USER_PROMPT_TEMPLATE = """As a medical assistant, analyze these symptoms and provide a medical assessment.

Patient Details:
- Age: {age}
- Gender: {gender}
- Symptoms: {symptoms}

Please provide:
1. Top 3 most likely conditions with probability percentages
2. Specific recommendations for care

Format your response as JSON with this structure:
{{
  "conditions": [
    {{
      "name": "condition name",
      "probability": 85,
      "description": "brief description"
    }}
  ],
  "recommendations": [
    "recommendation 1",
    "recommendation 2"
  ]
}}

Important: This is for educational purposes only and should not replace professional medical advice."""


class RemoteAnalysisError(Exception):
    """Remote analysis could not produce a usable result."""


class RemoteAnalysisPayload(BaseModel):
    """JSON object the model is asked to return."""
    conditions: list[ScoredCondition]
    recommendations: list[str]

    class Config:
        extra = "forbid"


def build_prompt(symptom_input: SymptomInput) -> str:
    """Embed patient details into the analysis prompt."""
    return USER_PROMPT_TEMPLATE.format(
        age=symptom_input.age,
        gender=symptom_input.gender,
        symptoms=symptom_input.symptoms
    )


def parse_completion(data: Any) -> RemoteAnalysisPayload:
    """
    Extract and validate the analysis payload from a chat completion body.

    Raises:
        RemoteAnalysisError: If the envelope or the JSON content does not
            match the expected shape.
    """
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise RemoteAnalysisError(f"Unexpected completion envelope: {e!r}") from e

    if not isinstance(content, str):
        raise RemoteAnalysisError("Completion content is not text")

    try:
        return RemoteAnalysisPayload.model_validate_json(content, strict=True)
    except ValidationError as e:
        raise RemoteAnalysisError(f"Malformed analysis JSON: {e.error_count()} errors") from e


class OpenAIAnalysisStrategy(AnalysisStrategy):
    """
    Delegate analysis to an OpenAI chat model.

    Makes exactly one request per analysis. Results are passed through as
    the model returned them; no clamping or re-ranking is applied.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: Optional[Settings] = None
    ):
        super().__init__("openai")
        self._client = http_client
        self._settings = settings or get_settings()

    def _request_body(self, symptom_input: SymptomInput) -> dict[str, Any]:
        return {
            "model": self._settings.OPENAI_MODEL,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_prompt(symptom_input)},
            ],
            "max_tokens": self._settings.OPENAI_MAX_TOKENS,
            "temperature": self._settings.OPENAI_TEMPERATURE,
        }

    async def analyze(self, symptom_input: SymptomInput) -> AnalysisResult:
        """
        Run the analysis remotely.

        Raises:
            RemoteAnalysisError: On transport failure, non-success status or
                a response that does not match the requested JSON shape.
        """
        url = f"{self._settings.OPENAI_BASE_URL.rstrip('/')}/chat/completions"

        try:
            response = await self._client.post(
                url,
                json=self._request_body(symptom_input),
                headers={"Authorization": f"Bearer {self._settings.OPENAI_API_KEY}"},
                timeout=self._settings.OPENAI_TIMEOUT
            )
        except httpx.HTTPError as e:
            raise RemoteAnalysisError(f"OpenAI request failed: {type(e).__name__}") from e

        if not response.is_success:
            raise RemoteAnalysisError(f"OpenAI API error: {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise RemoteAnalysisError("OpenAI response body is not JSON") from e

        payload = parse_completion(data)

        logger.info(
            "Remote analysis complete",
            extra={"conditions_found": len(payload.conditions), "model": self._settings.OPENAI_MODEL}
        )

        return AnalysisResult(
            conditions=payload.conditions,
            recommendations=payload.recommendations,
            source=AnalysisSource.OPENAI,
            timestamp=utcnow()
        )
