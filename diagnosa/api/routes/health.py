"""
Diagnosa — Health Routes
"""

from fastapi import APIRouter, Depends

from diagnosa import __version__
from ..dependencies import get_manager, EngineManager
from ..models import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    manager: EngineManager = Depends(get_manager)
) -> HealthResponse:
    """
    Server status.

    Reports whether the engine is loaded and the registry sizes.
    """
    engine = manager.get_engine()
    kb = engine.knowledge_base if engine else None

    return HealthResponse(
        status="ok" if engine else "degraded",
        version=__version__,
        engine_loaded=engine is not None,
        symptoms=len(kb.symptom_ids) if kb else 0,
        diseases=len(kb.disease_ids) if kb else 0,
    )


@router.get("/")
async def root():
    return {
        "name": "Diagnosa API",
        "version": __version__,
        "description": "Naive Bayes disease diagnosis calculator",
        "docs": "/docs",
        "health": "/health",
    }
