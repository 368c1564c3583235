"""
Core modules for the Thumbor URL builder
"""

from .enums import HAlign, ImageFormat, VAlign
from .exceptions import ImagePathRequiredError, UrlBuilderError
from .signing import compute_signature, get_secure_string
from .url_builder import Dimension, ThumborUrlBuilder

__all__ = [
    "ThumborUrlBuilder",
    "Dimension",
    "HAlign",
    "VAlign",
    "ImageFormat",
    "UrlBuilderError",
    "ImagePathRequiredError",
    "compute_signature",
    "get_secure_string",
]
