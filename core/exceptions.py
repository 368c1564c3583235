"""
Exceptions raised by the URL builder core.
"""

from core.constants import ErrorMessages


class UrlBuilderError(Exception):
    """Base exception for URL building errors"""


class ImagePathRequiredError(UrlBuilderError, ValueError):
    """Raised when a URL is rendered without an image path"""

    def __init__(self, message: str = ErrorMessages.IMAGE_PATH_REQUIRED):
        super().__init__(message)
        self.message = message
