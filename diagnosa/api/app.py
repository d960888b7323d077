"""
Diagnosa — FastAPI Application

Run:
    uvicorn diagnosa.api.app:app --reload --host 0.0.0.0 --port 8000

    or:

    python -m diagnosa serve
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
import time

from diagnosa import __version__
from .config import config
from .dependencies import engine_manager
from .models import ErrorResponse
from .routes import (
    health_router,
    symptoms_router,
    diseases_router,
    diagnosis_router,
)


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the engine at startup"""
    print("=" * 60)
    print("Diagnosa API Starting...")
    print("=" * 60)

    if engine_manager.load():
        print(f"API ready: {engine_manager.engine!r}")
    else:
        print(f"API starting in degraded mode: {engine_manager.error}")

    print(f"Swagger UI: http://{config.host}:{config.port}/docs")
    print("=" * 60)

    yield

    print("Diagnosa API Stopping...")


app = FastAPI(
    title=config.api_title,
    description=config.api_description,
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=config.cors_allow_credentials,
    allow_methods=config.cors_allow_methods,
    allow_headers=config.cors_allow_headers,
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()

    response = await call_next(request)

    process_time = time.time() - start_time

    if request.url.path.startswith(config.api_prefix):
        logger.info("%s %s -> %d (%.1fms)", request.method, request.url.path,
                    response.status_code, process_time * 1000)

    return response


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Internal server error",
            detail=str(exc) if config.debug else None
        ).model_dump()
    )


app.include_router(health_router)
app.include_router(symptoms_router, prefix=config.api_prefix)
app.include_router(diseases_router, prefix=config.api_prefix)
app.include_router(diagnosis_router, prefix=config.api_prefix)
