"""
URL API Router - Build and sign image service URLs
"""

import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_url_service
from api.exceptions import safe_endpoint
from schemas import UrlBuildRequest, UrlBuildResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/build")
@safe_endpoint
async def build_url(
    request: UrlBuildRequest, url_service=Depends(get_url_service)
) -> UrlBuildResponse:
    """
    Build an image service URL.

    Signs the URL when the service has a security key configured,
    otherwise returns an "unsafe" URL.

    Args:
        request: Transformation options and image path
        url_service: URL service dependency

    Returns:
        UrlBuildResponse with the URL and its operation path
    """
    return url_service.build(request)
