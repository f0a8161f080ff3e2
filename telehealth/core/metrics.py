"""
Prometheus metrics exposed on /api/v1/metrics.
"""

from prometheus_client import Counter

SYMPTOM_ANALYSES = Counter(
    "telehealth_symptom_analyses_total",
    "Symptom analyses served, by the strategy that produced them",
    ["source"],
)

REMOTE_ANALYSIS_FAILURES = Counter(
    "telehealth_remote_analysis_failures_total",
    "Remote analysis attempts that fell back to local analysis",
)
