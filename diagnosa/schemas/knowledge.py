"""
Diagnosa — Reference data schemas

Pydantic models for the static knowledge base:
- Symptom: one entry of the symptom vocabulary
- Disease: a candidate disease with its characteristic symptoms and prior
"""

from typing import Tuple
from pydantic import BaseModel, Field, field_validator


class Symptom(BaseModel):
    """
    Symptom of the vocabulary.

    Example:
        symptom = Symptom(id="demam", label="Demam")
    """
    id: str = Field(..., min_length=1, description="Stable symptom key, matched exactly")
    label: str = Field(..., description="Human-readable label")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {"id": "demam", "label": "Demam"}
        }


class Disease(BaseModel):
    """
    Candidate disease.

    The prior is a relative weight in (0, 1); priors across the
    registry do not have to sum to 1.

    Example:
        disease = Disease(
            id="flu",
            name="Influenza (Flu)",
            description="Infeksi virus yang menyerang sistem pernapasan",
            symptoms=("demam", "batuk"),
            prior=0.15,
        )
    """
    id: str = Field(..., min_length=1, description="Stable disease key")
    name: str = Field(..., description="Display name")
    description: str = Field(default="", description="Short description")
    symptoms: Tuple[str, ...] = Field(
        default_factory=tuple,
        description="Characteristic symptom ids"
    )
    prior: float = Field(..., gt=0.0, lt=1.0, description="Prior weight p(D)")

    @field_validator("symptoms")
    @classmethod
    def unique_symptoms(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """Drop duplicates, keep first-seen order"""
        seen = []
        for symptom in v:
            if symptom not in seen:
                seen.append(symptom)
        return tuple(seen)

    @property
    def symptom_count(self) -> int:
        return len(self.symptoms)

    def has_symptom(self, symptom_id: str) -> bool:
        return symptom_id in self.symptoms

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "id": "migrain",
                "name": "Migrain",
                "description": "Sakit kepala berat yang sering disertai mual",
                "symptoms": ["sakit-kepala", "mual", "muntah", "sensitif-cahaya", "pusing"],
                "prior": 0.09,
            }
        }
