"""
Diagnosa — Disease Routes
"""

from fastapi import APIRouter, Depends, HTTPException

from diagnosa.inference import NaiveBayesEngine
from diagnosa.schemas import Disease
from ..dependencies import require_engine
from ..models import DiseaseInfo, DiseaseListResponse

router = APIRouter(prefix="/diseases", tags=["Diseases"])


def _to_info(disease: Disease) -> DiseaseInfo:
    return DiseaseInfo(
        id=disease.id,
        name=disease.name,
        description=disease.description,
        symptoms=list(disease.symptoms),
        prior=disease.prior,
    )


@router.get("", response_model=DiseaseListResponse)
async def list_diseases(
    engine: NaiveBayesEngine = Depends(require_engine)
) -> DiseaseListResponse:
    """Disease registry in registry order"""
    diseases = [_to_info(d) for d in engine.knowledge_base.list_diseases()]
    return DiseaseListResponse(diseases=diseases, total=len(diseases))


@router.get("/{disease_id}", response_model=DiseaseInfo)
async def get_disease(
    disease_id: str,
    engine: NaiveBayesEngine = Depends(require_engine)
) -> DiseaseInfo:
    disease = engine.knowledge_base.get_disease(disease_id)
    if disease is None:
        raise HTTPException(status_code=404, detail=f"Disease '{disease_id}' not found")
    return _to_info(disease)
