"""API test fixtures — FastAPI app driven through httpx ASGITransport.

Invariants:
    - The lifespan is NOT run: app.state.controller is the in-memory controller
    - app.state is restored after each test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from roster.main import app


@pytest.fixture
async def client(controller):
    original = getattr(app.state, "controller", None)
    app.state.controller = controller
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.state.controller = original


@pytest.fixture
async def admin_client(client):
    res = await client.post(
        "/api/v1/auth/login", json={"username": "admin", "password": "admin123"},
    )
    assert res.status_code == 200
    return client


@pytest.fixture
async def user_client(client):
    res = await client.post(
        "/api/v1/auth/login", json={"username": "user", "password": "user123"},
    )
    assert res.status_code == 200
    return client
