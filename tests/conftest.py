"""Pytest fixtures for Quote Tuning API integration tests."""

from collections.abc import AsyncGenerator, Iterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.app import app
from src.rate_limit import limiter


@pytest.fixture(autouse=True)
def reset_rate_limits() -> Iterator[None]:
    """Clear the shared limiter's counters so tests do not eat each other's quota."""
    limiter.reset()
    yield
    limiter.reset()


@pytest_asyncio.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Yield an httpx AsyncClient wired to the FastAPI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
