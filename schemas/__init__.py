"""
Schemas Package

This package contains all Pydantic schemas for data validation and serialization,
shared by the URL builder core, the service layer and the API routers.
"""

# Common models (core data structures)
from .common import CropWindow

# URL models
from .url import CropRequest, UrlBuildRequest, UrlBuildResponse

__all__ = [
    # Common models
    "CropWindow",
    # URL models
    "CropRequest",
    "UrlBuildRequest",
    "UrlBuildResponse",
]
