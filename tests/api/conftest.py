"""API test fixtures: FastAPI app over an in-memory AppContext.

Invariants:
    - get_context dependency overridden; the lifespan (SQL storage) never runs
    - Every test gets a fresh context seeded with the demo catalog
"""

import pytest
from httpx import ASGITransport, AsyncClient

from storefront.api.dependencies import get_context
from storefront.infrastructure.memory_storage import InMemoryStorage
from storefront.infrastructure.navigation import InMemoryNavigation
from storefront.main import app
from storefront.services.app_context import build_context

PASSCODE = "test-passcode"


@pytest.fixture
def api_ctx():
    return build_context(
        InMemoryStorage(), InMemoryNavigation(), admin_passcode=PASSCODE, seed_catalog=True,
    )


@pytest.fixture
async def client(api_ctx):
    """Test client with the AppContext dependency overridden."""
    app.dependency_overrides[get_context] = lambda: api_ctx

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def admin_client(client):
    res = await client.post("/api/v1/session/login", json={"passcode": PASSCODE})
    assert res.status_code == 200
    return client
