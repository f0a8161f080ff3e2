"""
Local Symptom Analyzer

Deterministic keyword scoring against the condition catalog plus
rule-based care recommendations. Needs no network and always succeeds.
"""

from typing import Sequence

from telehealth.core.logging import get_logger
from telehealth.schemas.common import utcnow
from telehealth.schemas.symptoms import (
    AnalysisResult,
    AnalysisSource,
    ConditionCatalogEntry,
    ScoredCondition,
    SymptomInput,
)
from telehealth.services.base_strategy import AnalysisStrategy
from telehealth.services.condition_catalog import CONDITION_CATALOG

logger = get_logger(__name__)


KEYWORD_MATCH_BOOST = 15
ELDERLY_INFLUENZA_BOOST = 10
ELDERLY_AGE_BRACKET = "65+"
MAX_PROBABILITY = 95
MIN_PROBABILITY = 20
MAX_CONDITIONS = 3


GENERAL_RECOMMENDATIONS = (
    "Rest and get adequate sleep",
    "Stay well hydrated with water and clear fluids",
)

# Checked in this order; a rule fires when any of its triggers is a substring
SYMPTOM_RECOMMENDATIONS = (
    (("fever",), (
        "Monitor temperature regularly",
        "Consider over-the-counter fever reducers (acetaminophen or ibuprofen)",
    )),
    (("cough",), (
        "Use a humidifier or breathe steam from a hot shower",
        "Consider throat lozenges or warm salt water gargles",
    )),
    (("headache",), (
        "Apply cold or warm compress to head/neck",
        "Consider over-the-counter pain relievers",
    )),
    (("nausea", "vomiting"), (
        "Eat bland foods (BRAT diet: bananas, rice, applesauce, toast)",
        "Avoid dairy, caffeine, and fatty foods",
    )),
    (("diarrhea",), (
        "Increase fluid intake to prevent dehydration",
        "Consider oral rehydration solutions",
    )),
)

ELDERLY_RECOMMENDATION = "Monitor symptoms closely and seek medical attention if worsening"

SAFETY_NET_RECOMMENDATIONS = (
    "Consult a healthcare provider if symptoms worsen or persist beyond 7 days",
    "Seek immediate medical attention if you experience difficulty breathing, chest pain, or severe dehydration",
)


def count_keyword_matches(symptoms_text: str, keywords: Sequence[str]) -> int:
    """Count keywords contained anywhere in the (lowercased) symptom text."""
    return sum(1 for keyword in keywords if keyword in symptoms_text)


def score_conditions(
    symptoms_text: str,
    age: str,
    gender: str,
    catalog: Sequence[ConditionCatalogEntry] = CONDITION_CATALOG
) -> list[ScoredCondition]:
    """
    Rank catalog conditions against free-text symptoms.

    Each keyword found as a substring adds 15 points to the condition's base
    probability; patients aged 65+ get a further 10 on influenza. Scores are
    capped at 95, ranked (ties keep catalog order), cut to the top three and
    anything under 20 is dropped.

    Args:
        symptoms_text: Patient's symptom description.
        age: Age bracket label.
        gender: Patient gender. Accepted for parity with the remote
            prompt; no catalog rule depends on it.
        catalog: Entries to score, in tie-breaking order.

    Returns:
        Between zero and three scored conditions, most likely first.
    """
    text = symptoms_text.lower()
    scored = []

    for entry in catalog:
        probability = entry.base_probability + count_keyword_matches(text, entry.keywords) * KEYWORD_MATCH_BOOST

        if age == ELDERLY_AGE_BRACKET and "Influenza" in entry.name:
            probability += ELDERLY_INFLUENZA_BOOST

        scored.append(ScoredCondition(
            name=entry.name,
            probability=min(probability, MAX_PROBABILITY),
            description=entry.description
        ))

    # sorted() is stable, so equal scores stay in catalog order
    ranked = sorted(scored, key=lambda c: c.probability, reverse=True)[:MAX_CONDITIONS]
    return [c for c in ranked if c.probability >= MIN_PROBABILITY]


def derive_recommendations(symptoms_text: str, age: str) -> list[str]:
    """
    Build ordered care advice: general, symptom-specific, age-specific, safety net.

    Args:
        symptoms_text: Patient's symptom description.
        age: Age bracket label.

    Returns:
        Recommendation strings in display order.
    """
    text = symptoms_text.lower()
    recommendations = list(GENERAL_RECOMMENDATIONS)

    for triggers, advice in SYMPTOM_RECOMMENDATIONS:
        if any(trigger in text for trigger in triggers):
            recommendations.extend(advice)

    if age == ELDERLY_AGE_BRACKET:
        recommendations.append(ELDERLY_RECOMMENDATION)

    recommendations.extend(SAFETY_NET_RECOMMENDATIONS)
    return recommendations


class LocalAnalysisStrategy(AnalysisStrategy):
    """Catalog-based analysis used directly or as the remote fallback."""

    def __init__(self, catalog: Sequence[ConditionCatalogEntry] = CONDITION_CATALOG):
        super().__init__("local_analysis")
        self._catalog = catalog

    async def analyze(self, symptom_input: SymptomInput) -> AnalysisResult:
        conditions = score_conditions(
            symptom_input.symptoms,
            symptom_input.age,
            symptom_input.gender,
            catalog=self._catalog
        )
        recommendations = derive_recommendations(symptom_input.symptoms, symptom_input.age)

        logger.debug(
            "Local analysis complete",
            extra={"conditions_found": len(conditions), "age": symptom_input.age}
        )

        return AnalysisResult(
            conditions=conditions,
            recommendations=recommendations,
            source=AnalysisSource.LOCAL_ANALYSIS,
            timestamp=utcnow()
        )
