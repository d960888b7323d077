"""
Diagnosa — Diagnosis result schemas

Pydantic models for:
- ConfidenceLevel: qualitative confidence band
- DiagnosisResult: one ranked disease with its posterior percentage
- DiagnosisReport: ranked results plus the evidence that was used
"""

from typing import Dict, List
from enum import Enum
from pydantic import BaseModel, Field


class ConfidenceLevel(str, Enum):
    """Confidence band of a posterior percentage"""
    HIGH = "high"       # > 40
    MEDIUM = "medium"   # 20 - 40
    LOW = "low"         # <= 20

    @classmethod
    def from_percent(
        cls,
        percent: float,
        high: float = 40.0,
        medium: float = 20.0
    ) -> "ConfidenceLevel":
        """Boundaries are exclusive: exactly 40.0 is MEDIUM, exactly 20.0 is LOW"""
        if percent > high:
            return cls.HIGH
        elif percent > medium:
            return cls.MEDIUM
        else:
            return cls.LOW


class DiagnosisResult(BaseModel):
    """
    One disease scored for one inference call.

    Example:
        result = DiagnosisResult(
            disease_id="migrain",
            name="Migrain",
            probability_percent=83.2,
            confidence=ConfidenceLevel.HIGH,
        )
    """
    disease_id: str = Field(..., description="Disease key")
    name: str = Field(..., description="Display name")
    description: str = Field(default="")
    probability_percent: float = Field(
        ...,
        ge=0.0,
        le=100.0,
        description="Normalized posterior probability [0, 100]"
    )
    confidence: ConfidenceLevel = Field(..., description="Confidence band")

    # Evidence symptoms that belong to the disease's characteristic set
    matching_symptoms: List[str] = Field(default_factory=list)

    @property
    def probability(self) -> float:
        """Posterior on the [0, 1] scale"""
        return self.probability_percent / 100.0

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "disease_id": "migrain",
                "name": "Migrain",
                "description": "Sakit kepala berat yang sering disertai mual",
                "probability_percent": 83.2,
                "confidence": "high",
                "matching_symptoms": ["mual", "muntah", "pusing"],
            }
        }


class DiagnosisReport(BaseModel):
    """
    Ranked results together with the evidence they were computed from.

    `ignored_symptoms` lists identifiers that are not in the vocabulary;
    they never influence the results.
    """
    evidence: List[str] = Field(default_factory=list, description="Known symptom ids used")
    ignored_symptoms: List[str] = Field(default_factory=list, description="Unknown ids dropped")
    symptom_coverage: float = Field(
        default=0.0, ge=0.0, le=1.0,
        description="Share of the vocabulary present in the evidence"
    )
    results: List[DiagnosisResult] = Field(default_factory=list)

    @property
    def top_result(self):
        return self.results[0] if self.results else None

    @property
    def is_empty(self) -> bool:
        return not self.results

    def to_summary(self) -> Dict:
        """Short summary for display"""
        top = self.top_result
        return {
            "top_diagnosis": top.name if top else None,
            "probability_percent": top.probability_percent if top else 0.0,
            "confidence": top.confidence.value if top else None,
            "evidence_count": len(self.evidence),
            "ignored_count": len(self.ignored_symptoms),
            "symptom_coverage": self.symptom_coverage,
        }

    class Config:
        frozen = True
