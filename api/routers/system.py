"""
System API Router - Status and configuration
"""

import logging
import time
from datetime import datetime

import psutil
from fastapi import APIRouter, Depends, Request

from api.dependencies import get_url_service
from api.exceptions import safe_endpoint

logger = logging.getLogger(__name__)

router = APIRouter()

# Track start time
START_TIME = time.time()


@router.get("/status")
@safe_endpoint
async def get_status(url_service=Depends(get_url_service)) -> dict:
    """Get service status"""
    process = psutil.Process()
    memory_info = process.memory_info()

    return {
        "status": "healthy",
        "uptime": time.time() - START_TIME,
        "memory_usage": {"process_mb": memory_info.rss / 1024 / 1024},
        "server_url": url_service.server_url,
        "signed": url_service.is_signed,
    }


@router.get("/config")
@safe_endpoint
async def get_config(request: Request) -> dict:
    """Get current configuration (security key redacted)"""
    return request.app.state.config


@router.get("/health")
async def health_check() -> dict:
    """Simple health check"""
    return {"status": "healthy", "timestamp": datetime.now().isoformat()}
