"""
Thumbor URL Builder - Main FastAPI Application
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.exceptions import register_exception_handlers
from api.routers import system, url
from config import get_settings
from core.constants import APIConstants, SystemConstants
from services.url_service import UrlService

# Get configuration
settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.system.log_level),
    format=SystemConstants.LOG_FORMAT,
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle"""
    logger.info("Starting Thumbor URL builder...")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Debug mode: {settings.system.debug}")

    app.state.url_service = UrlService(
        security_key=settings.thumbor.security_key,
        server_url=settings.thumbor.server_url,
    )
    app.state.config = settings.to_dict()

    yield

    logger.info("Thumbor URL builder shut down")


# Create FastAPI app
app = FastAPI(
    title="Thumbor URL Builder",
    description="Builds and signs URLs for a Thumbor image service",
    version="1.0.0",
    lifespan=lifespan,
)

if settings.api.cors_enabled:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Register exception handlers
register_exception_handlers(app)

# Include routers
app.include_router(url.router, prefix="/api/url", tags=["URL"])
app.include_router(system.router, prefix="/api/system", tags=["System"])


# Root endpoint
@app.get("/")
async def root():
    return {
        "name": "Thumbor URL Builder",
        "status": "running",
        "version": "1.0.0",
        "api_version": APIConstants.API_VERSION,
        "endpoints": {
            "url": "/api/url",
            "system": "/api/system",
            "docs": "/docs",
        },
    }


# Health check endpoint
@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "services": {
            "url_service": getattr(app.state, "url_service", None) is not None,
        },
    }


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.system.debug,
        log_level=settings.system.log_level.lower(),
    )
