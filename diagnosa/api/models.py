"""
Diagnosa — API Models

Pydantic models for API requests and responses.
"""

from pydantic import BaseModel, Field
from typing import List, Optional

from diagnosa.schemas import DiagnosisResult


# ============================================================
# Knowledge base models
# ============================================================

class SymptomInfo(BaseModel):
    """Vocabulary entry"""
    id: str
    label: str


class SymptomListResponse(BaseModel):
    symptoms: List[SymptomInfo]
    total: int


class DiseaseInfo(BaseModel):
    """Registry entry"""
    id: str
    name: str
    description: str
    symptoms: List[str]
    prior: float


class DiseaseListResponse(BaseModel):
    diseases: List[DiseaseInfo]
    total: int


# ============================================================
# Diagnosis models
# ============================================================

class DiagnoseRequest(BaseModel):
    """Diagnosis request; empty list is allowed and yields no results"""
    symptoms: List[str] = Field(default_factory=list, max_length=500)

    class Config:
        json_schema_extra = {
            "example": {"symptoms": ["demam", "batuk", "sesak-napas"]}
        }


class DiagnoseResponse(BaseModel):
    """Ranked results"""
    symptoms: List[str]
    ignored_symptoms: List[str]
    symptom_coverage: float
    results: List[DiagnosisResult]
    processing_time_ms: float


# ============================================================
# Health & errors
# ============================================================

class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
    engine_loaded: bool
    symptoms: int
    diseases: int


class ErrorResponse(BaseModel):
    error: str
    detail: Optional[str] = None
