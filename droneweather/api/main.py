"""Main FastAPI application for the Drone Weather Advisor API."""
import logging
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from droneweather import __version__ as app_version
from droneweather.api.dependencies import get_data_orchestrator_dependency
from droneweather.api.routes import api_router
from droneweather.core.config import settings
from droneweather.core.utils import configure_locale, setup_logging

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Actions to perform on application startup and shutdown."""
    setup_logging(settings.LOG_LEVEL)
    configure_locale()
    logger.info(f"Drone Weather Advisor API (v{app_version}) started on {settings.API_HOST}:{settings.API_PORT}")
    logger.info(f"Environment: {settings.ENVIRONMENT.value}")
    if not settings.has_api_key:
        logger.warning("No OpenWeatherMap API key configured; serving demo data")
    yield
    await get_data_orchestrator_dependency().close()
    get_data_orchestrator_dependency.cache_clear()

app = FastAPI(
    title="Drone Weather Advisor API",
    description="Weather-based flight conditions for consumer drones.",
    version=app_version,
    docs_url="/api/docs",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.API_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Middleware for request logging and timing
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()
    logger.info(f"Incoming request: {request.method} {request.url.path}")
    response = await call_next(request)
    process_time = (time.time() - start_time) * 1000
    logger.info(f"Response: {response.status_code} - Processed in {process_time:.2f}ms")
    response.headers["X-Process-Time"] = str(process_time)
    return response

@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception for {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "An unexpected server error occurred."},
    )

app.include_router(api_router)

@app.get("/", tags=["Root"])
async def read_root():
    """Welcome endpoint for the Drone Weather Advisor API."""
    return {
        "message": f"Drone Weather Advisor API Version {app_version}",
        "documentation": "/api/docs"
    }

if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL)
    uvicorn.run(
        "droneweather.api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=(settings.ENVIRONMENT == "development"),
        log_level=settings.LOG_LEVEL.lower()
    )
