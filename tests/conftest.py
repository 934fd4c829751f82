"""
Storefront API — Test Configuration (conftest.py)
===================================================

Fixtures:
    ├── route_table: the application's merged resource route table
    └── test_client: HTTPX AsyncClient wired to the FastAPI app (no server)
"""

import os

# Must be set before storefront.config is imported
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["CORS_ORIGINS"] = "http://localhost:3000"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport


@pytest.fixture
def route_table():
    from storefront.routes import route_table
    return route_table


@pytest_asyncio.fixture
async def test_client():
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from storefront.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
