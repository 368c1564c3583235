"""
Pytest configuration and fixtures for Thumbor URL builder tests
"""

import pytest

from core.url_builder import ThumborUrlBuilder
from services.url_service import UrlService

SERVER_URL = "http://example.com"
SECURITY_KEY = "my-security-key"


@pytest.fixture
def server_url():
    return SERVER_URL


@pytest.fixture
def security_key():
    return SECURITY_KEY


@pytest.fixture
def builder():
    """Create an unsigned builder"""
    return ThumborUrlBuilder(None, SERVER_URL)


@pytest.fixture
def signed_builder():
    """Create a builder with a security key"""
    return ThumborUrlBuilder(SECURITY_KEY, SERVER_URL)


@pytest.fixture
def url_service():
    """Create an unsigned UrlService"""
    return UrlService(security_key=None, server_url=SERVER_URL)


@pytest.fixture
def signed_url_service():
    """Create a UrlService with a security key"""
    return UrlService(security_key=SECURITY_KEY, server_url=SERVER_URL)
