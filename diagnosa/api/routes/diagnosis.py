"""
Diagnosa — Diagnosis Routes
"""

import time
from fastapi import APIRouter, Depends

from diagnosa.inference import NaiveBayesEngine
from ..dependencies import require_engine
from ..models import DiagnoseRequest, DiagnoseResponse

router = APIRouter(prefix="/diagnose", tags=["Diagnosis"])


@router.post("", response_model=DiagnoseResponse)
async def diagnose(
    request: DiagnoseRequest,
    engine: NaiveBayesEngine = Depends(require_engine)
) -> DiagnoseResponse:
    """
    Rank diseases for the given symptoms.

    Unknown symptom ids are reported in `ignored_symptoms` and do not
    match any disease. Empty `symptoms` → empty `results`.

    Example:
    ```json
    {
        "symptoms": ["demam", "batuk", "sesak-napas"]
    }
    ```
    """
    start_time = time.time()

    report = engine.diagnose_report(request.symptoms)

    elapsed_ms = (time.time() - start_time) * 1000

    return DiagnoseResponse(
        symptoms=report.evidence,
        ignored_symptoms=report.ignored_symptoms,
        symptom_coverage=report.symptom_coverage,
        results=report.results,
        processing_time_ms=elapsed_ms,
    )
