"""
Condition catalog for the local symptom analyzer.

Eight common primary-care presentations, each with a prior probability and
the lowercase keywords that raise it. Declaration order is significant: it
breaks ties when two conditions score the same.
"""

from telehealth.schemas.symptoms import ConditionCatalogEntry

CONDITION_CATALOG: tuple[ConditionCatalogEntry, ...] = (
    ConditionCatalogEntry(
        name="Viral Upper Respiratory Infection",
        base_probability=70,
        description=(
            "Common cold symptoms including nasal congestion, runny nose, and mild fever. "
            "Usually resolves within 7-10 days."
        ),
        keywords=("cold", "runny nose", "congestion", "sneezing", "mild fever"),
    ),
    ConditionCatalogEntry(
        name="Influenza (Flu)",
        base_probability=60,
        description=(
            "Viral infection causing fever, body aches, fatigue, and respiratory symptoms. "
            "More severe than common cold."
        ),
        keywords=("flu", "fever", "body aches", "fatigue", "chills", "headache"),
    ),
    ConditionCatalogEntry(
        name="Gastroenteritis",
        base_probability=50,
        description=(
            "Stomach flu causing nausea, vomiting, diarrhea, and abdominal pain. "
            "Often resolves within 2-3 days."
        ),
        keywords=("nausea", "vomiting", "diarrhea", "stomach pain", "abdominal pain"),
    ),
    ConditionCatalogEntry(
        name="Allergic Rhinitis",
        base_probability=45,
        description=(
            "Allergic reaction to airborne substances causing sneezing, runny nose, and itchy eyes."
        ),
        keywords=("allergies", "sneezing", "itchy eyes", "runny nose", "seasonal"),
    ),
    ConditionCatalogEntry(
        name="Tension Headache",
        base_probability=40,
        description=(
            "Most common type of headache, often caused by stress, lack of sleep, or dehydration."
        ),
        keywords=("headache", "head pain", "stress", "tension"),
    ),
    ConditionCatalogEntry(
        name="Acute Bronchitis",
        base_probability=55,
        description=(
            "Inflammation of the bronchial tubes causing persistent cough, often with mucus production."
        ),
        keywords=("cough", "bronchitis", "mucus", "chest congestion"),
    ),
    ConditionCatalogEntry(
        name="Migraine",
        base_probability=35,
        description=(
            "Severe headache often accompanied by nausea, vomiting, and sensitivity to light and sound."
        ),
        keywords=("migraine", "severe headache", "nausea", "light sensitivity"),
    ),
    ConditionCatalogEntry(
        name="Urinary Tract Infection",
        base_probability=30,
        description=(
            "Bacterial infection of the urinary system causing painful urination and frequent urge to urinate."
        ),
        keywords=("uti", "burning urination", "frequent urination", "bladder pain"),
    ),
)


def get_condition_catalog() -> tuple[ConditionCatalogEntry, ...]:
    """Return the process-wide condition catalog."""
    return CONDITION_CATALOG
