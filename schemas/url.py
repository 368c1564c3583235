"""
URL building API models.

This module contains request and response models for URL operations:
- URL build requests (all transformation options)
- URL build responses
"""

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field, NonNegativeInt

from core.constants import UrlConstants
from core.enums import HAlign, ImageFormat, VAlign

DimensionField = Union[NonNegativeInt, Literal[UrlConstants.ORIGINAL_DIMENSION]]


class CropRequest(BaseModel):
    """Crop coordinates as sent by clients; non-positive values disable cropping"""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0


class UrlBuildRequest(BaseModel):
    """Request to build an image URL"""

    class Config:
        extra = "forbid"

    image_path: str = Field(..., description="Path of the source image")
    width: DimensionField = Field(0, description="Target width, 0 or 'orig'")
    height: DimensionField = Field(0, description="Target height, 0 or 'orig'")
    fit_in: bool = Field(False, description="Fit within width x height instead of cropping")
    smart: bool = False
    flip_horizontally: bool = False
    flip_vertically: bool = False
    h_align: Optional[HAlign] = None
    v_align: Optional[VAlign] = None
    crop: Optional[CropRequest] = None
    meta: bool = Field(False, description="Return JSON metadata instead of the image")
    filters: List[str] = Field(default_factory=list, description="Filter calls, e.g. quality(80)")
    format: Optional[ImageFormat] = None


class UrlBuildResponse(BaseModel):
    """Response from URL building"""

    url: str
    operation_path: str
    signed: bool
