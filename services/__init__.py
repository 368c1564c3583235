"""
Service layer for the Thumbor URL builder
"""

from .url_service import UrlService

__all__ = ["UrlService"]
