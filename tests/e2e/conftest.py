"""E2E test fixtures for API layer testing."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from depcycle.infrastructure.api.dependencies import reset_cycle_cache
from depcycle.infrastructure.api.main import app


@pytest.fixture(autouse=True)
def fresh_cycle_cache():
    """Start every test with an empty shared cycle cache."""
    reset_cycle_cache()
    yield
    reset_cycle_cache()


@pytest_asyncio.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Provide an async HTTP client for testing the API."""
    transport = ASGITransport(app=app)

    async with AsyncClient(
        transport=transport,
        base_url="http://testserver",
    ) as client:
        yield client
