"""API test fixtures - FastAPI test client over a fresh store per test.

Invariants:
    - Every test gets its own OrderStore/OrderService
    - get_order_service dependency overridden, so the process-wide store
      built in main.py is never touched by tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

from orders_api.api.dependencies import get_order_service
from orders_api.main import app


@pytest.fixture
async def client(service):
    app.dependency_overrides[get_order_service] = lambda: service
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
