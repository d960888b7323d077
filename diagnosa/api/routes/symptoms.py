"""
Diagnosa — Symptoms Routes
"""

from fastapi import APIRouter, Depends

from diagnosa.inference import NaiveBayesEngine
from ..dependencies import require_engine
from ..models import SymptomInfo, SymptomListResponse

router = APIRouter(prefix="/symptoms", tags=["Symptoms"])


@router.get("", response_model=SymptomListResponse)
async def list_symptoms(
    engine: NaiveBayesEngine = Depends(require_engine)
) -> SymptomListResponse:
    """Symptom vocabulary in canonical order"""
    symptoms = [
        SymptomInfo(id=s.id, label=s.label)
        for s in engine.knowledge_base.list_symptoms()
    ]
    return SymptomListResponse(symptoms=symptoms, total=len(symptoms))
