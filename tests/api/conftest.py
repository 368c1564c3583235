"""
Pytest configuration for API integration tests
"""

import pytest
from fastapi.testclient import TestClient

from config import Settings, ThumborConfig


def _make_client(security_key):
    from main import app
    from services.url_service import UrlService

    settings = Settings(thumbor=ThumborConfig(server_url="http://example.com", security_key=security_key))

    app.state.url_service = UrlService(
        security_key=settings.thumbor.security_key,
        server_url=settings.thumbor.server_url,
    )
    app.state.config = settings.to_dict()

    # No context manager so the lifespan does not replace the test state
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture(scope="function")
def client():
    """
    Create a test client with an unsigned URL service in app state.
    Each test gets a fresh client to avoid state contamination.
    """
    return _make_client(None)


@pytest.fixture(scope="function")
def signed_client():
    """Create a test client with a signing URL service"""
    return _make_client("my-security-key")
