"""
Diagnosa — API Routes

Exports all routers.
"""

from .health import router as health_router
from .symptoms import router as symptoms_router
from .diseases import router as diseases_router
from .diagnosis import router as diagnosis_router

__all__ = [
    'health_router',
    'symptoms_router',
    'diseases_router',
    'diagnosis_router',
]
