"""API test fixtures — FastAPI test client over a fresh registry.

Invariants:
    - get_registry overridden so every test starts from an empty registry
    - Overrides cleared after each test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from client_registry.api.dependencies import get_registry
from client_registry.main import app


@pytest.fixture
async def client(registry):
    """FastAPI test client with the registry dependency overridden."""
    app.dependency_overrides[get_registry] = lambda: registry

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def raising_client():
    """Test client that returns 500 responses instead of re-raising server errors."""
    def broken_registry():
        raise RuntimeError("registry exploded: secret internals")

    app.dependency_overrides[get_registry] = broken_registry
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
