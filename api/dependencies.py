"""
Shared FastAPI dependencies for the URL builder service.
"""

import logging

from fastapi import HTTPException, Request

from services.url_service import UrlService

logger = logging.getLogger(__name__)


def get_url_service(request: Request) -> UrlService:
    """
    Get UrlService instance from app state.

    Args:
        request: FastAPI request object

    Returns:
        UrlService instance

    Raises:
        HTTPException: If the service is not initialized
    """
    try:
        return request.app.state.url_service
    except AttributeError as e:
        logger.error(f"URL service not initialized in app state: {e}")
        raise HTTPException(
            status_code=500, detail="Internal server error: URL service not initialized"
        )
