"""
FastAPI application entry point.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from storefront_home.api.v1.router import router as v1_router
from storefront_home.config import get_settings
from storefront_home.deps import is_storefront_configured
from storefront_home.schemas.common import HealthResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    if not is_storefront_configured(settings):
        logger.warning("Storefront domain/token not configured; homepage endpoints will return 503")
    yield


app = FastAPI(
    title="Storefront Home API",
    description="Homepage data for the storefront: featured collection and recommended product cards",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify allowed origins
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Include routers
app.include_router(v1_router, prefix="/api/v1")


@app.get("/api/v1/health", response_model=HealthResponse, tags=["health"])
async def health_check():
    """Health check endpoint."""
    return HealthResponse(ok=True, storefront_configured=is_storefront_configured(get_settings()))


@app.get("/", tags=["root"])
async def root():
    """Root endpoint."""
    return {
        "message": "Storefront Home API",
        "version": "1.0.0",
        "docs": "/docs"
    }
