"""
Diagnosa — REST API module

FastAPI front end over the inference engine.

Components:
- app.py: FastAPI application
- routes/: API endpoints
- models.py: Pydantic request/response models
- dependencies.py: shared engine

Run:
    uvicorn diagnosa.api.app:app --reload --port 8000

Endpoints:
    GET  /                       - Root info
    GET  /health                 - Health check
    GET  /api/symptoms           - Symptom vocabulary
    GET  /api/diseases           - Disease registry
    GET  /api/diseases/{id}      - One disease
    POST /api/diagnose           - Ranked diagnosis
"""

from .app import app
from .dependencies import engine_manager, require_engine


__all__ = [
    "app",
    "engine_manager",
    "require_engine",
]
