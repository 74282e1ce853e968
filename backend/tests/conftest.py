"""
Products API — Test Configuration (conftest.py)
=================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── product_service: Fresh ProductService over the default seed
    ├── test_client: HTTPX AsyncClient over https (passes the HTTPS redirect)
    └── http_client: HTTPX AsyncClient over plain http (gets redirected)
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests
os.environ["HTTPS_REDIRECT"] = "true"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures (created fresh for each test)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def product_service():
    """A ProductService built from the default seed list."""
    from app.services.product_service import ProductService
    return ProductService()


@pytest_asyncio.fixture
async def test_client():
    """
    Provides an async HTTP test client for endpoint testing.

    What:    HTTPX AsyncClient talking to the FastAPI app over ASGI.
    Why:     Tests the full middleware pipeline without running a server.
    How:     base_url uses https so requests pass HTTPSRedirectMiddleware.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from app.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="https://test") as client:
        yield client


@pytest_asyncio.fixture
async def http_client():
    """Plain-http client; redirects are not followed."""
    from app.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
