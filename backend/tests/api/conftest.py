"""API test fixtures: httpx client over ASGI against a fresh app.

Invariants:
    - Each test builds its own app from explicit Settings (no env lookups)
    - Lifespan is not run; logging setup is exercised separately
"""

import pytest
from httpx import ASGITransport, AsyncClient

from cloud_mock.config import Settings
from cloud_mock.main import create_app


@pytest.fixture
def settings():
    return Settings(mock_enabled=True, api_key_prefix="essu_", log_format="text")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
