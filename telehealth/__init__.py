"""Telehealth Symptom Analysis Service."""

__version__ = "1.0.0"
