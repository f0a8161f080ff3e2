"""
Base class for symptom analysis strategies.
"""

from abc import ABC, abstractmethod

from telehealth.schemas.symptoms import AnalysisResult, SymptomInput


class AnalysisStrategy(ABC):
    """Abstract base class for all analysis strategies."""

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    async def analyze(self, symptom_input: SymptomInput) -> AnalysisResult:
        """
        Analyze a patient's symptoms.

        Args:
            symptom_input: Symptom text with age bracket and gender.

        Returns:
            Ranked conditions and ordered recommendations.
        """
        pass
