"""
Diagnosa — Data schemas

Pydantic models for validation and serialization.

Components:
- knowledge.py: Symptom, Disease
- diagnosis.py: ConfidenceLevel, DiagnosisResult, DiagnosisReport

Example:
    from diagnosa.schemas import Disease, DiagnosisResult, ConfidenceLevel

    disease = Disease(id="flu", name="Influenza (Flu)", symptoms=("demam",), prior=0.15)
    json_data = disease.model_dump_json()
    restored = Disease.model_validate_json(json_data)
"""

from .knowledge import Symptom, Disease
from .diagnosis import ConfidenceLevel, DiagnosisResult, DiagnosisReport


__all__ = [
    "Symptom",
    "Disease",
    "ConfidenceLevel",
    "DiagnosisResult",
    "DiagnosisReport",
]
