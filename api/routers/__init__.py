"""
API Routers for the Thumbor URL builder
"""

from . import system, url

__all__ = ["url", "system"]
